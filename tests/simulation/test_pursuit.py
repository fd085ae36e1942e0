"""Tests for zombie_escape.simulation.pursuit module."""

from __future__ import annotations

from random import Random

import pytest

from zombie_escape.domain.grid import manhattan_distance
from zombie_escape.simulation.pursuit import move_all_adversaries, next_move


class TestNextMove:
    def test_moves_toward_player(self) -> None:
        assert next_move((0, 0), (0, 3), frozenset(), 6, Random(0)) == (0, 1)
        assert next_move((4, 2), (0, 2), frozenset(), 6, Random(0)) == (-1, 0)

    def test_boxed_in_corner_stays(self) -> None:
        obstacles = frozenset({(1, 0), (0, 1)})
        assert next_move((0, 0), (5, 5), obstacles, 6, Random(0)) == (0, 0)

    def test_all_four_neighbors_blocked_stays(self) -> None:
        obstacles = frozenset({(1, 2), (3, 2), (2, 1), (2, 3)})
        assert next_move((2, 2), (5, 5), obstacles, 6, Random(0)) == (0, 0)

    def test_skips_obstacle(self) -> None:
        # direct route right is blocked; the other three moves tie
        obstacles = frozenset({(2, 3)})
        move = next_move((2, 2), (2, 5), obstacles, 6, Random(0))
        assert move in {(-1, 0), (1, 0), (0, -1)}

    def test_zero_jitter_breaks_ties_in_move_order(self) -> None:
        # up and left both reach distance 3; up is evaluated first
        assert next_move((2, 2), (0, 0), frozenset(), 6, Random(0), jitter=0.0) == (-1, 0)

    def test_jitter_varies_tie_breaking(self) -> None:
        moves = {next_move((2, 2), (0, 0), frozenset(), 6, Random(seed)) for seed in range(60)}
        assert moves == {(-1, 0), (0, -1)}

    def test_never_picks_farther_cell_over_closer(self) -> None:
        for seed in range(50):
            move = next_move((3, 3), (3, 0), frozenset(), 6, Random(seed))
            assert move == (0, -1)

    def test_stalls_in_local_minimum(self) -> None:
        # a short wall below the adversary traps it oscillating along row 0
        obstacles = frozenset({(1, 1), (1, 2), (1, 3)})
        rng = Random(0)
        adversary = (0, 2)
        for _ in range(10):
            move = next_move(adversary, (5, 2), obstacles, 6, rng)
            adversary = (adversary[0] + move[0], adversary[1] + move[1])
            assert adversary[0] == 0
            assert adversary[1] in {1, 2, 3}


class TestMoveAllAdversaries:
    def test_each_adversary_moves_independently(self) -> None:
        result = move_all_adversaries((0, 0), ((0, 1), (1, 0)), frozenset(), 6, Random(0))
        # both may land on the same cell; there is no collision avoidance
        assert result == ((0, 0), (0, 0))

    def test_preserves_order_and_length(self) -> None:
        adversaries = ((0, 0), (5, 0), (0, 5))
        result = move_all_adversaries((5, 5), adversaries, frozenset(), 6, Random(2))
        assert len(result) == 3
        for before, after in zip(adversaries, result, strict=True):
            assert manhattan_distance(before, after) == 1
            assert manhattan_distance(after, (5, 5)) < manhattan_distance(before, (5, 5))

    def test_blocked_adversary_stays(self) -> None:
        obstacles = frozenset({(1, 0), (0, 1)})
        result = move_all_adversaries((5, 5), ((0, 0), (3, 3)), obstacles, 6, Random(0))
        assert result[0] == (0, 0)
        assert result[1] != (3, 3)

    def test_empty_adversaries(self) -> None:
        assert move_all_adversaries((5, 5), (), frozenset(), 6, Random(0)) == ()


@pytest.mark.parametrize("jitter", [-0.1, 1.0, 2.0])
def test_out_of_range_jitter_raises(jitter: float) -> None:
    with pytest.raises(ValueError, match="jitter"):
        next_move((0, 0), (0, 3), frozenset(), 6, Random(0), jitter=jitter)
    with pytest.raises(ValueError, match="jitter"):
        move_all_adversaries((0, 3), ((0, 0),), frozenset(), 6, Random(0), jitter=jitter)
