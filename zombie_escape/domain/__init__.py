"""Domain layer: board model, pathfinding, game state and errors."""

from zombie_escape.domain.errors import GenerationExhaustedError, InvalidLevelError
from zombie_escape.domain.grid import (
    Coordinate,
    Direction,
    Grid,
    is_blocked,
    is_in_bounds,
    manhattan_distance,
    player_start_for,
    step,
)
from zombie_escape.domain.pathfinding import optimal_route, path_length, shortest_path
from zombie_escape.domain.state import GameState, GameStatus, MoveOutcome

__all__ = [
    "Coordinate",
    "Direction",
    "GameState",
    "GameStatus",
    "GenerationExhaustedError",
    "Grid",
    "InvalidLevelError",
    "MoveOutcome",
    "is_blocked",
    "is_in_bounds",
    "manhattan_distance",
    "optimal_route",
    "path_length",
    "player_start_for",
    "shortest_path",
    "step",
]
