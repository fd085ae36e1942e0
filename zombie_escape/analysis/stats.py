"""End-of-level statistics: moves taken versus the optimal route."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from zombie_escape.domain.grid import Coordinate
from zombie_escape.domain.pathfinding import optimal_route, path_length
from zombie_escape.domain.state import GameState, GameStatus


@dataclass(frozen=True)
class LevelStats:
    """Summary of one level attempt.

    ``elapsed_seconds`` is wall-clock time measured by the caller; the core
    never reads a clock.
    """

    level: int
    status: GameStatus
    moves: int
    optimal_path_length: int | None
    adversary_count: int
    path_taken: tuple[Coordinate, ...]
    elapsed_seconds: float | None = None

    @property
    def path_efficiency(self) -> float | None:
        """Optimal length over moves taken; 1.0 means a perfect route."""
        if not self.optimal_path_length or self.moves < 1:
            return None
        return self.optimal_path_length / self.moves

    def to_row(self) -> dict[str, int | float | str | None]:
        return {
            "level": self.level,
            "status": self.status.value,
            "moves": self.moves,
            "optimal_path_length": self.optimal_path_length,
            "adversary_count": self.adversary_count,
            "path_efficiency": self.path_efficiency,
            "elapsed_seconds": self.elapsed_seconds,
            "path_taken": format_path(self.path_taken),
        }


def build_level_stats(state: GameState, elapsed_seconds: float | None = None) -> LevelStats:
    if elapsed_seconds is not None and elapsed_seconds < 0:
        raise ValueError("elapsed_seconds must be >= 0")
    return LevelStats(
        level=state.level,
        status=state.status,
        moves=state.move_count,
        optimal_path_length=path_length(optimal_route(state.grid)),
        adversary_count=len(state.adversaries),
        path_taken=state.player_path,
        elapsed_seconds=elapsed_seconds,
    )


def format_path(path: Sequence[Coordinate]) -> str:
    """Render a path as ``"(r, c) -> (r, c)"``."""
    return " -> ".join(f"({row}, {col})" for row, col in path)
