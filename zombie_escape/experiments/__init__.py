"""Experiment orchestration: scripted benchmarks over levels and seeds."""

from zombie_escape.experiments.benchmark import (
    RunResult,
    build_level_summary,
    play_scripted,
    route_step,
    run_benchmark,
)

__all__ = [
    "RunResult",
    "build_level_summary",
    "play_scripted",
    "route_step",
    "run_benchmark",
]
