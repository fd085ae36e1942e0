"""CLI entrypoint: scripted benchmarks and board rendering.

This module owns argument parsing and subcommand dispatch. Domain logic lives
in ``zombie_escape.experiments`` and ``zombie_escape.viz``.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from random import Random

from zombie_escape.config.constants import DEFAULT_MAX_TURNS
from zombie_escape.config.types import BenchmarkConfig, GeneratorConfig, PursuitConfig
from zombie_escape.experiments.benchmark import run_benchmark
from zombie_escape.generation.level import initialize_level
from zombie_escape.io.paths import resolve_within_base
from zombie_escape.viz.render import render_board
from zombie_escape.viz.theme import get_theme

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def _parse_positive_int_csv(raw_values: str, label: str) -> tuple[int, ...]:
    """Parse comma-delimited positive integers."""
    parts = [part.strip() for part in raw_values.split(",") if part.strip()]
    if not parts:
        raise ValueError(f"{label} must not be empty")

    values: list[int] = []
    for part in parts:
        try:
            value = int(part)
        except ValueError as exc:
            raise ValueError(f"{label} must contain integers") from exc
        if value < 1:
            raise ValueError(f"{label} values must be >= 1")
        values.append(value)
    return tuple(values)


def _parse_log_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {raw}")
    return level


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _build_benchmark_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("benchmark", help="Play levels with the scripted shortest-path runner")
    p.set_defaults(func=_handle_benchmark)
    p.add_argument("--levels", type=str, default="1,2,3", help="Comma-separated level numbers")
    p.add_argument("--n-seeds", type=int, default=20)
    p.add_argument("--seed-start", type=int, default=0)
    p.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS)
    p.add_argument("--out-dir", type=Path, default=Path("data/benchmark"))
    p.add_argument("--trajectories", action="store_true", help="Also write per-turn positions")
    p.add_argument("--jitter", type=float, default=None)
    p.add_argument("--max-layout-attempts", type=int, default=None)


def _build_render_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("render", help="Generate a level and render its board to an image")
    p.set_defaults(func=_handle_render)
    p.add_argument("--level", type=int, default=1)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--theme", type=str, default="dark")
    p.add_argument("--show-optimal-path", action="store_true")
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _handle_benchmark(args: argparse.Namespace) -> None:
    generator = (
        GeneratorConfig(max_layout_attempts=args.max_layout_attempts)
        if args.max_layout_attempts is not None
        else GeneratorConfig()
    )
    pursuit = PursuitConfig(jitter=args.jitter) if args.jitter is not None else PursuitConfig()
    config = BenchmarkConfig(
        levels=_parse_positive_int_csv(args.levels, "levels"),
        n_seeds=args.n_seeds,
        seed_start=args.seed_start,
        max_turns=args.max_turns,
        out_dir=args.out_dir,
        record_trajectories=args.trajectories,
        generator=generator,
        pursuit=pursuit,
    )
    results = run_benchmark(config)
    logger.info("benchmark finished: %d runs written to %s", len(results), config.out_dir)


def _handle_render(args: argparse.Namespace) -> None:
    base_dir = Path(args.base_dir).resolve()
    output = resolve_within_base(args.output, base_dir)
    state = initialize_level(args.level, rng=Random(args.seed))
    render_board(
        state,
        output,
        theme=get_theme(args.theme),
        show_optimal_path=args.show_optimal_path,
    )
    logger.info("rendered level %d (seed %d) to %s", args.level, args.seed, output)


def main() -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Zombie escape level tools")
    parser.add_argument("--log-level", type=str, default="INFO")
    sub = parser.add_subparsers(dest="command", required=True)
    _build_benchmark_parser(sub)
    _build_render_parser(sub)
    args = parser.parse_args()

    logging.basicConfig(
        level=_parse_log_level(args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
