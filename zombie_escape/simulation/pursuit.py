"""Greedy local pursuit for adversaries.

Each adversary looks one cell ahead and steps to whichever legal neighbor is
closest (Manhattan) to the player, with a small uniform jitter breaking ties.
There is no global pathfinding: an adversary can stall behind a wall.
"""

from __future__ import annotations

from random import Random

from zombie_escape.config.constants import MOVES, PURSUIT_JITTER, STAY
from zombie_escape.config.types import validate_jitter
from zombie_escape.domain.grid import (
    Coordinate,
    is_blocked,
    is_in_bounds,
    manhattan_distance,
    step,
)


def next_move(
    adversary: Coordinate,
    player: Coordinate,
    obstacles: frozenset[Coordinate],
    grid_size: int,
    rng: Random,
    jitter: float = PURSUIT_JITTER,
) -> Coordinate:
    """Return the move delta for one adversary, or ``(0, 0)`` if boxed in."""
    validate_jitter(jitter)
    best_move = STAY
    best_score = float("inf")
    for delta in MOVES:
        target = step(adversary, delta)
        if not is_in_bounds(target, grid_size) or is_blocked(target, obstacles):
            continue
        score = manhattan_distance(target, player) + rng.random() * jitter
        if score < best_score:
            best_score = score
            best_move = delta
    return best_move


def move_all_adversaries(
    player: Coordinate,
    adversaries: tuple[Coordinate, ...] | list[Coordinate],
    obstacles: frozenset[Coordinate],
    grid_size: int,
    rng: Random,
    jitter: float = PURSUIT_JITTER,
) -> tuple[Coordinate, ...]:
    """Advance every adversary one step toward *player*.

    Moves are computed independently against the same player cell, so
    adversaries may end up sharing a cell.
    """
    validate_jitter(jitter)
    return tuple(
        step(adversary, next_move(adversary, player, obstacles, grid_size, rng, jitter))
        for adversary in adversaries
    )
