"""Level generation and pursuit simulation core for a grid-chase game."""

from zombie_escape.domain import (
    Direction,
    GameState,
    GameStatus,
    GenerationExhaustedError,
    Grid,
    InvalidLevelError,
    MoveOutcome,
    shortest_path,
)
from zombie_escape.generation import initialize_level
from zombie_escape.simulation import GameSession, compute_optimal_path_length, request_move

__all__ = [
    "Direction",
    "GameSession",
    "GameState",
    "GameStatus",
    "GenerationExhaustedError",
    "Grid",
    "InvalidLevelError",
    "MoveOutcome",
    "compute_optimal_path_length",
    "initialize_level",
    "request_move",
    "shortest_path",
]
