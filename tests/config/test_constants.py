from zombie_escape.config.constants import (
    ADVERSARY_COUNT_STEPS,
    ADVERSARY_MIN_SPACING,
    FLUSH_THRESHOLD,
    GRID_SIZE_STEPS,
    MAX_ADVERSARIES,
    MAX_GRID_SIZE,
    MAX_LAYOUT_ATTEMPTS,
    MAX_SAMPLES,
    MOVES,
    PURSUIT_JITTER,
    STAY,
)


def test_moves_are_up_down_left_right() -> None:
    assert MOVES == ((-1, 0), (1, 0), (0, -1), (0, 1))


def test_stay_is_zero_vector() -> None:
    assert STAY == (0, 0)
    assert STAY not in MOVES


def test_jitter_below_one() -> None:
    # Jitter must never reorder cells whose integer distances differ.
    assert 0.0 < PURSUIT_JITTER < 1.0


def test_grid_size_steps_increase() -> None:
    sizes = [size for _, size in GRID_SIZE_STEPS] + [MAX_GRID_SIZE]
    assert sizes == sorted(sizes)
    levels = [level for level, _ in GRID_SIZE_STEPS]
    assert levels == sorted(levels)


def test_adversary_steps_increase() -> None:
    counts = [count for _, count in ADVERSARY_COUNT_STEPS] + [MAX_ADVERSARIES]
    assert counts == sorted(counts)


def test_adversary_spacing_is_positive() -> None:
    assert isinstance(ADVERSARY_MIN_SPACING, int) and ADVERSARY_MIN_SPACING >= 1


def test_retry_caps_are_large() -> None:
    assert MAX_LAYOUT_ATTEMPTS >= 100
    assert MAX_SAMPLES >= 10_000


def test_flush_threshold_is_large() -> None:
    assert isinstance(FLUSH_THRESHOLD, int) and FLUSH_THRESHOLD >= 1024
