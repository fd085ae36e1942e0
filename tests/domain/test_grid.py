"""Tests for zombie_escape.domain.grid module."""

from __future__ import annotations

import pytest

from zombie_escape.domain.grid import (
    Direction,
    Grid,
    is_blocked,
    is_in_bounds,
    manhattan_distance,
    player_start_for,
    step,
)


class TestCoordinateHelpers:
    @pytest.mark.parametrize(
        ("coord", "expected"),
        [((0, 0), True), ((5, 5), True), ((6, 0), False), ((0, -1), False), ((-1, 3), False)],
    )
    def test_is_in_bounds(self, coord: tuple[int, int], expected: bool) -> None:
        assert is_in_bounds(coord, 6) is expected

    def test_is_blocked(self) -> None:
        obstacles = frozenset({(1, 1), (2, 3)})
        assert is_blocked((1, 1), obstacles)
        assert not is_blocked((3, 2), obstacles)

    def test_manhattan_distance(self) -> None:
        assert manhattan_distance((0, 0), (3, 4)) == 7
        assert manhattan_distance((2, 2), (2, 2)) == 0

    def test_step(self) -> None:
        assert step((3, 3), Direction.UP.delta) == (2, 3)
        assert step((3, 3), Direction.RIGHT.delta) == (3, 4)

    def test_player_start_is_bottom_right(self) -> None:
        assert player_start_for(8) == (7, 7)


class TestDirection:
    def test_parse_name(self) -> None:
        assert Direction.parse("up") is Direction.UP
        assert Direction.parse(" Left ") is Direction.LEFT

    def test_parse_delta(self) -> None:
        assert Direction.parse((1, 0)) is Direction.DOWN
        assert Direction.parse([0, 1]) is Direction.RIGHT

    def test_parse_passthrough(self) -> None:
        assert Direction.parse(Direction.UP) is Direction.UP

    def test_parse_rejects_diagonal(self) -> None:
        with pytest.raises(ValueError, match="cardinal"):
            Direction.parse((1, 1))

    def test_parse_rejects_zero(self) -> None:
        with pytest.raises(ValueError):
            Direction.parse((0, 0))

    def test_parse_rejects_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="direction must be one of"):
            Direction.parse("north")

    @pytest.mark.parametrize("raw", [5, None, 1.5])
    def test_parse_rejects_non_iterable(self, raw: object) -> None:
        with pytest.raises(ValueError, match="cardinal"):
            Direction.parse(raw)  # type: ignore[arg-type]


class TestGrid:
    def test_create_from_iterable(self) -> None:
        grid = Grid.create(6, exit=(0, 0), obstacles=[(1, 1), (1, 1), (2, 2)])
        assert grid.obstacles == frozenset({(1, 1), (2, 2)})
        assert grid.player_start == (5, 5)

    def test_is_passable(self) -> None:
        grid = Grid.create(6, exit=(0, 0), obstacles=[(1, 1)])
        assert grid.is_passable((0, 1))
        assert not grid.is_passable((1, 1))
        assert not grid.is_passable((6, 1))

    def test_exit_on_obstacle_rejected(self) -> None:
        with pytest.raises(ValueError, match="exit must not be an obstacle"):
            Grid.create(6, exit=(1, 1), obstacles=[(1, 1)])

    def test_exit_on_start_rejected(self) -> None:
        with pytest.raises(ValueError, match="exit must differ"):
            Grid.create(6, exit=(5, 5))

    def test_start_on_obstacle_rejected(self) -> None:
        with pytest.raises(ValueError, match="player start"):
            Grid.create(6, exit=(0, 0), obstacles=[(5, 5)])

    def test_exit_out_of_bounds_rejected(self) -> None:
        with pytest.raises(ValueError, match="outside"):
            Grid.create(6, exit=(6, 0))

    def test_obstacle_out_of_bounds_rejected(self) -> None:
        with pytest.raises(ValueError, match="inside the grid"):
            Grid.create(6, exit=(0, 0), obstacles=[(0, 7)])

    def test_grid_is_hashable_value(self) -> None:
        a = Grid.create(6, exit=(0, 0), obstacles=[(1, 1)])
        b = Grid.create(6, exit=(0, 0), obstacles=[(1, 1)])
        assert a == b
        assert hash(a) == hash(b)
