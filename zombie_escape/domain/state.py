"""Immutable per-level game state and turn outcomes."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from zombie_escape.domain.grid import Coordinate, Grid


class GameStatus(Enum):
    """Controller state machine: PLAYING is initial, WON and LOST are terminal."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.PLAYING


class MoveOutcome(Enum):
    """Result of one move request."""

    CONTINUED = "continued"
    WON = "won"
    LOST = "lost"
    REJECTED = "rejected"


@dataclass(frozen=True)
class GameState:
    """Snapshot of one level attempt.

    Every accepted move produces a new snapshot; ``player_path`` is the full
    visit history starting at the player start cell.
    """

    level: int
    grid: Grid
    player: Coordinate
    adversaries: tuple[Coordinate, ...]
    player_path: tuple[Coordinate, ...]
    move_count: int = 0
    status: GameStatus = GameStatus.PLAYING
    death_position: Coordinate | None = None

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    def advance(
        self,
        player: Coordinate,
        adversaries: tuple[Coordinate, ...],
        status: GameStatus,
        death_position: Coordinate | None = None,
    ) -> GameState:
        """Return the snapshot after one accepted player move."""
        return replace(
            self,
            player=player,
            adversaries=adversaries,
            player_path=self.player_path + (player,),
            move_count=self.move_count + 1,
            status=status,
            death_position=death_position,
        )
