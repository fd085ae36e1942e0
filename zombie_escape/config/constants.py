"""Centralized domain constants for level generation and pursuit.

All magic numbers shared across generation, simulation and tooling are defined
here. Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

MOVES: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
"""Cardinal move deltas as (d_row, d_col), in evaluation order: up, down, left, right."""

STAY: tuple[int, int] = (0, 0)
"""Zero move returned when an adversary has no legal neighbor."""

PURSUIT_JITTER = 0.3
"""Upper bound (exclusive) of the uniform tie-breaking noise added to pursuit distances."""

GRID_SIZE_STEPS: tuple[tuple[int, int], ...] = ((1, 6), (4, 8), (7, 10))
"""(max_level, grid_size) steps; levels above the last step use MAX_GRID_SIZE."""

MAX_GRID_SIZE = 12
"""Grid size for every level past the last step in GRID_SIZE_STEPS."""

ADVERSARY_COUNT_STEPS: tuple[tuple[int, int], ...] = ((1, 1), (4, 2), (8, 3))
"""(max_level, adversary_count) steps; levels above the last step use MAX_ADVERSARIES."""

MAX_ADVERSARIES = 4
"""Adversary count for every level past the last step in ADVERSARY_COUNT_STEPS."""

BASE_OBSTACLES = 5
"""Obstacle count before the per-level increment."""

OBSTACLES_PER_LEVEL = 1.5
"""Obstacle increment per level; the total is floored."""

ADVERSARY_MIN_SPACING = 2
"""Minimum Manhattan distance between any two adversaries at level start."""

PLAYER_CLEARANCE_DIVISOR = 3
"""Adversaries start at least grid_size // PLAYER_CLEARANCE_DIVISOR from the player."""

MAX_LAYOUT_ATTEMPTS = 1_000
"""Safety cap on obstacle layouts discarded as unsolvable before giving up."""

MAX_SAMPLES = 100_000
"""Safety cap on random cell draws per sampling loop."""

FLUSH_THRESHOLD = 8_192
"""Flush trajectory rows to Parquet once this in-memory row count is reached."""

DEFAULT_MAX_TURNS = 200
"""Default turn limit for one scripted benchmark run."""
