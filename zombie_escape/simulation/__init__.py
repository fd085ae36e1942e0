"""Simulation layer: pursuit, turn control, sessions and trajectory persistence."""

from zombie_escape.simulation.controller import compute_optimal_path_length, request_move
from zombie_escape.simulation.persistence import TrajectoryWriter
from zombie_escape.simulation.pursuit import move_all_adversaries, next_move
from zombie_escape.simulation.session import GameSession

__all__ = [
    "GameSession",
    "TrajectoryWriter",
    "compute_optimal_path_length",
    "move_all_adversaries",
    "next_move",
    "request_move",
]
