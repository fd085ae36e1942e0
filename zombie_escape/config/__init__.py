"""Configuration layer: constants and typed config dataclasses."""

from zombie_escape.config.constants import (
    ADVERSARY_MIN_SPACING,
    BASE_OBSTACLES,
    DEFAULT_MAX_TURNS,
    FLUSH_THRESHOLD,
    MAX_ADVERSARIES,
    MAX_GRID_SIZE,
    MAX_LAYOUT_ATTEMPTS,
    MAX_SAMPLES,
    MOVES,
    OBSTACLES_PER_LEVEL,
    PLAYER_CLEARANCE_DIVISOR,
    PURSUIT_JITTER,
    STAY,
)
from zombie_escape.config.types import (
    BenchmarkConfig,
    GeneratorConfig,
    PursuitConfig,
    validate_jitter,
)

__all__ = [
    "ADVERSARY_MIN_SPACING",
    "BASE_OBSTACLES",
    "BenchmarkConfig",
    "DEFAULT_MAX_TURNS",
    "FLUSH_THRESHOLD",
    "GeneratorConfig",
    "MAX_ADVERSARIES",
    "MAX_GRID_SIZE",
    "MAX_LAYOUT_ATTEMPTS",
    "MAX_SAMPLES",
    "MOVES",
    "OBSTACLES_PER_LEVEL",
    "PLAYER_CLEARANCE_DIVISOR",
    "PURSUIT_JITTER",
    "PursuitConfig",
    "STAY",
    "validate_jitter",
]
