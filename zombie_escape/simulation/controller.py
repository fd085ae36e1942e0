"""Turn controller: applies one player move and resolves the outcome.

Turn order: the player steps, adversaries react to the player's new cell,
then reaching the exit is checked before any collision, so arriving on the
exit always wins even if an adversary lands there on the same turn.
"""

from __future__ import annotations

from random import Random

from zombie_escape.config.constants import PURSUIT_JITTER
from zombie_escape.config.types import validate_jitter
from zombie_escape.domain.grid import Coordinate, Direction, step
from zombie_escape.domain.pathfinding import optimal_route, path_length
from zombie_escape.domain.state import GameState, GameStatus, MoveOutcome
from zombie_escape.simulation.pursuit import move_all_adversaries


def request_move(
    state: GameState,
    direction: Direction | Coordinate | str,
    rng: Random | None = None,
    jitter: float = PURSUIT_JITTER,
) -> tuple[GameState, MoveOutcome]:
    """Advance *state* by one player move.

    Returns the new snapshot and the outcome. Moves into a wall, an obstacle
    or past the board edge, and any move after the game has ended, return the
    unchanged *state* with ``MoveOutcome.REJECTED``. A *jitter* outside
    ``[0.0, 1.0)`` raises ValueError.
    """
    move = Direction.parse(direction)
    validate_jitter(jitter)
    if state.is_over:
        return state, MoveOutcome.REJECTED

    grid = state.grid
    candidate = step(state.player, move.delta)
    if not grid.is_passable(candidate):
        return state, MoveOutcome.REJECTED

    rng = rng if rng is not None else Random()
    adversaries = move_all_adversaries(
        candidate, state.adversaries, grid.obstacles, grid.size, rng, jitter
    )

    if candidate == grid.exit:
        return state.advance(candidate, adversaries, GameStatus.WON), MoveOutcome.WON
    if candidate in adversaries:
        lost = state.advance(candidate, adversaries, GameStatus.LOST, death_position=candidate)
        return lost, MoveOutcome.LOST
    return state.advance(candidate, adversaries, GameStatus.PLAYING), MoveOutcome.CONTINUED


def compute_optimal_path_length(state: GameState) -> int | None:
    """Moves along the shortest start-to-exit route, or None if unreachable."""
    return path_length(optimal_route(state.grid))
