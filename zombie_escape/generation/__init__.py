"""Level generation: board scaling, obstacle layouts and adversary placement."""

from zombie_escape.generation.level import (
    adversary_count_for_level,
    generate_exit,
    generate_obstacles,
    grid_size_for_level,
    initialize_level,
    obstacle_target_for_level,
    place_adversaries,
)

__all__ = [
    "adversary_count_for_level",
    "generate_exit",
    "generate_obstacles",
    "grid_size_for_level",
    "initialize_level",
    "obstacle_target_for_level",
    "place_adversaries",
]
