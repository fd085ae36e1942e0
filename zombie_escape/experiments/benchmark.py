"""Scripted-runner benchmark for level difficulty.

A runner that always takes the first step of a fresh shortest path to the
exit plays every (level, seed) pair. The runner ignores adversaries, so its
win rate is a rough lower bound on how forgiving each level is. Results are
persisted as Parquet tables plus a JSON summary.
"""

from __future__ import annotations

import json
import logging
import statistics
from dataclasses import dataclass
from pathlib import Path
from random import Random

import pyarrow as pa
import pyarrow.parquet as pq

from zombie_escape.analysis.stats import build_level_stats
from zombie_escape.config.types import BenchmarkConfig
from zombie_escape.domain.grid import Direction
from zombie_escape.domain.pathfinding import shortest_path
from zombie_escape.domain.state import GameState, MoveOutcome
from zombie_escape.generation.level import initialize_level
from zombie_escape.io.paths import (
    benchmark_runs_path,
    level_summary_json_path,
    level_summary_path,
    logs_dir,
    trajectories_path,
)
from zombie_escape.io.schemas import (
    BENCHMARK_RUNS_SCHEMA,
    BENCHMARK_SCHEMA_VERSION,
    LEVEL_SUMMARY_SCHEMA,
)
from zombie_escape.simulation.controller import request_move
from zombie_escape.simulation.persistence import TrajectoryWriter

logger = logging.getLogger(__name__)

TIMEOUT = "timeout"
"""Outcome label for runs that hit ``max_turns`` without ending."""


@dataclass(frozen=True)
class RunResult:
    """Outcome of one scripted run."""

    run_id: str
    level: int
    seed: int
    outcome: str
    final_state: GameState


def _run_id(level: int, seed: int) -> str:
    return f"level{level}_seed{seed}"


def route_step(state: GameState) -> Direction | None:
    """First step of a shortest path from the player to the exit, if any."""
    grid = state.grid
    path = shortest_path(state.player, grid.exit, grid.obstacles, grid.size)
    if path is None or len(path) < 2:
        return None
    (r0, c0), (r1, c1) = path[0], path[1]
    return Direction((r1 - r0, c1 - c0))


def play_scripted(
    level: int,
    seed: int,
    config: BenchmarkConfig,
    trajectory_writer: TrajectoryWriter | None = None,
) -> RunResult:
    """Generate *level* from *seed* and play it with the shortest-path runner."""
    rng = Random(seed)
    run_id = _run_id(level, seed)
    state = initialize_level(level, rng=rng, config=config.generator)
    if trajectory_writer is not None:
        trajectory_writer.record(run_id, state)

    outcome = TIMEOUT
    for _ in range(config.max_turns):
        direction = route_step(state)
        if direction is None:
            break
        state, move_outcome = request_move(state, direction, rng=rng, jitter=config.pursuit.jitter)
        if move_outcome is MoveOutcome.REJECTED:
            break
        if trajectory_writer is not None:
            trajectory_writer.record(run_id, state)
        if move_outcome in (MoveOutcome.WON, MoveOutcome.LOST):
            outcome = move_outcome.value
            break

    return RunResult(run_id=run_id, level=level, seed=seed, outcome=outcome, final_state=state)


def run_row(result: RunResult) -> dict[str, int | float | str | None]:
    state = result.final_state
    stats = build_level_stats(state)
    death = state.death_position
    return {
        "schema_version": BENCHMARK_SCHEMA_VERSION,
        "run_id": result.run_id,
        "level": result.level,
        "seed": result.seed,
        "grid_size": state.grid.size,
        "obstacle_count": len(state.grid.obstacles),
        "adversary_count": stats.adversary_count,
        "optimal_path_length": stats.optimal_path_length,
        "outcome": result.outcome,
        "moves": stats.moves,
        "path_efficiency": stats.path_efficiency,
        "death_row": death[0] if death is not None else None,
        "death_col": death[1] if death is not None else None,
    }


def _mean_or_none(values: list[float]) -> float | None:
    return statistics.fmean(values) if values else None


def build_level_summary(
    level: int, rows: list[dict[str, int | float | str | None]]
) -> dict[str, int | float | None]:
    """Aggregate run rows of one level into win/loss/timeout counts and means."""
    level_rows = [row for row in rows if row["level"] == level]
    won = [row for row in level_rows if row["outcome"] == MoveOutcome.WON.value]
    n_lost = sum(1 for row in level_rows if row["outcome"] == MoveOutcome.LOST.value)
    n_runs = len(level_rows)
    return {
        "schema_version": BENCHMARK_SCHEMA_VERSION,
        "level": level,
        "n_runs": n_runs,
        "n_won": len(won),
        "n_lost": n_lost,
        "n_timeout": n_runs - len(won) - n_lost,
        "win_rate": len(won) / n_runs if n_runs else None,
        "mean_moves_won": _mean_or_none([float(row["moves"]) for row in won]),  # type: ignore[arg-type]
        "mean_optimal_path_length": _mean_or_none(
            [
                float(row["optimal_path_length"])  # type: ignore[arg-type]
                for row in level_rows
                if row["optimal_path_length"] is not None
            ]
        ),
        "mean_path_efficiency": _mean_or_none(
            [float(row["path_efficiency"]) for row in won if row["path_efficiency"] is not None]  # type: ignore[arg-type]
        ),
    }


def run_benchmark(config: BenchmarkConfig) -> list[RunResult]:
    """Play every configured (level, seed) pair and persist the results."""
    out_dir = Path(config.out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    seeds = range(config.seed_start, config.seed_start + config.n_seeds)
    logger.info(
        "benchmark: levels=%s seeds=%d..%d runs=%d",
        ",".join(str(level) for level in config.levels),
        seeds.start,
        seeds.stop - 1,
        config.total_runs,
    )

    writer = TrajectoryWriter(trajectories_path(out_dir)) if config.record_trajectories else None
    results: list[RunResult] = []
    try:
        for level in config.levels:
            for seed in seeds:
                results.append(play_scripted(level, seed, config, trajectory_writer=writer))
    finally:
        if writer is not None:
            writer.close()

    rows = [run_row(result) for result in results]
    summaries = [build_level_summary(level, rows) for level in config.levels]
    for summary in summaries:
        logger.info(
            "level %s: won=%s lost=%s timeout=%s",
            summary["level"],
            summary["n_won"],
            summary["n_lost"],
            summary["n_timeout"],
        )

    pq.write_table(
        pa.Table.from_pylist(rows, schema=BENCHMARK_RUNS_SCHEMA), benchmark_runs_path(out_dir)
    )
    pq.write_table(
        pa.Table.from_pylist(summaries, schema=LEVEL_SUMMARY_SCHEMA), level_summary_path(out_dir)
    )
    level_summary_json_path(out_dir).write_text(
        json.dumps(summaries, ensure_ascii=False, indent=2)
    )
    return results
