"""Square board model: coordinates, directions and obstacle membership.

Coordinates are ``(row, col)`` tuples, 0-indexed from the top-left corner.
The player always starts in the bottom-right corner ``(size - 1, size - 1)``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

Coordinate: TypeAlias = tuple[int, int]
"""A ``(row, col)`` cell position."""


class Direction(Enum):
    """Cardinal player moves; the value is the ``(d_row, d_col)`` delta."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Coordinate:
        return self.value

    @classmethod
    def parse(cls, raw: Direction | Coordinate | str) -> Direction:
        """Coerce a Direction, a delta tuple or a name such as ``"up"``."""
        if isinstance(raw, Direction):
            return raw
        if isinstance(raw, str):
            try:
                return cls[raw.strip().upper()]
            except KeyError as exc:
                valid = ", ".join(d.name.lower() for d in cls)
                raise ValueError(f"direction must be one of {valid}") from exc
        try:
            return cls(tuple(raw))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"not a cardinal move delta: {raw!r}") from exc


def is_in_bounds(coord: Coordinate, grid_size: int) -> bool:
    """Return True iff both axes lie within ``[0, grid_size)``."""
    row, col = coord
    return 0 <= row < grid_size and 0 <= col < grid_size


def is_blocked(coord: Coordinate, obstacles: frozenset[Coordinate] | set[Coordinate]) -> bool:
    return coord in obstacles


def manhattan_distance(a: Coordinate, b: Coordinate) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def step(coord: Coordinate, delta: Coordinate) -> Coordinate:
    """Return the cell reached from *coord* by *delta* (no bounds check)."""
    return (coord[0] + delta[0], coord[1] + delta[1])


def player_start_for(grid_size: int) -> Coordinate:
    return (grid_size - 1, grid_size - 1)


@dataclass(frozen=True)
class Grid:
    """Immutable board for one level: size, obstacle set and exit cell."""

    size: int
    obstacles: frozenset[Coordinate]
    exit: Coordinate

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError("size must be >= 2")
        if not is_in_bounds(self.exit, self.size):
            raise ValueError(f"exit {self.exit} lies outside a {self.size}x{self.size} grid")
        if self.exit == self.player_start:
            raise ValueError("exit must differ from the player start")
        if self.exit in self.obstacles:
            raise ValueError("exit must not be an obstacle")
        if self.player_start in self.obstacles:
            raise ValueError("player start must not be an obstacle")
        if any(not is_in_bounds(cell, self.size) for cell in self.obstacles):
            raise ValueError("obstacles must lie inside the grid")

    @classmethod
    def create(cls, size: int, exit: Coordinate, obstacles: Iterable[Coordinate] = ()) -> Grid:
        """Build a Grid from any iterable of obstacle cells."""
        return cls(size=size, obstacles=frozenset(obstacles), exit=exit)

    @property
    def player_start(self) -> Coordinate:
        return player_start_for(self.size)

    def is_passable(self, coord: Coordinate) -> bool:
        """True iff *coord* is inside the board and not an obstacle."""
        return is_in_bounds(coord, self.size) and not is_blocked(coord, self.obstacles)
