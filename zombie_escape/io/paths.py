"""Path construction helpers for benchmark output directories."""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def logs_dir(out_dir: Path) -> Path:
    return out_dir / "logs"


def benchmark_runs_path(out_dir: Path) -> Path:
    return logs_dir(out_dir) / "benchmark_runs.parquet"


def level_summary_path(out_dir: Path) -> Path:
    return logs_dir(out_dir) / "level_summary.parquet"


def level_summary_json_path(out_dir: Path) -> Path:
    return logs_dir(out_dir) / "level_summary.json"


def trajectories_path(out_dir: Path) -> Path:
    return logs_dir(out_dir) / "trajectories.parquet"
