"""Parquet schema definitions for benchmark artifacts.

Every module that writes or reads benchmark output works against the column
contracts defined here.
"""

from __future__ import annotations

import pyarrow as pa

BENCHMARK_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Per-run and per-level tables
# ---------------------------------------------------------------------------

BENCHMARK_RUNS_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("run_id", pa.string()),
        ("level", pa.int64()),
        ("seed", pa.int64()),
        ("grid_size", pa.int64()),
        ("obstacle_count", pa.int64()),
        ("adversary_count", pa.int64()),
        ("optimal_path_length", pa.int64()),
        ("outcome", pa.string()),
        ("moves", pa.int64()),
        ("path_efficiency", pa.float64()),
        ("death_row", pa.int64()),
        ("death_col", pa.int64()),
    ]
)

LEVEL_SUMMARY_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("level", pa.int64()),
        ("n_runs", pa.int64()),
        ("n_won", pa.int64()),
        ("n_lost", pa.int64()),
        ("n_timeout", pa.int64()),
        ("win_rate", pa.float64()),
        ("mean_moves_won", pa.float64()),
        ("mean_optimal_path_length", pa.float64()),
        ("mean_path_efficiency", pa.float64()),
    ]
)

# ---------------------------------------------------------------------------
# Turn-by-turn trajectories
# ---------------------------------------------------------------------------

TRAJECTORY_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("turn", pa.int64()),
        ("actor", pa.string()),
        ("actor_index", pa.int64()),
        ("row", pa.int64()),
        ("col", pa.int64()),
    ]
)
