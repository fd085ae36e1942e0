"""Configuration dataclasses for level generation, pursuit and benchmark runs.

All frozen dataclasses validate themselves in ``__post_init__`` so an invalid
configuration fails at construction time rather than deep inside a run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from zombie_escape.config.constants import (
    DEFAULT_MAX_TURNS,
    MAX_LAYOUT_ATTEMPTS,
    MAX_SAMPLES,
    PURSUIT_JITTER,
)

__all__ = [
    "BenchmarkConfig",
    "GeneratorConfig",
    "PursuitConfig",
    "validate_jitter",
]


def validate_jitter(jitter: float) -> float:
    """Return *jitter* unchanged, or raise ValueError outside ``[0.0, 1.0)``."""
    # Noise of 1.0 or more could reorder cells whose integer distances differ.
    if not 0.0 <= jitter < 1.0:
        raise ValueError("jitter must be in [0.0, 1.0)")
    return jitter


@dataclass(frozen=True)
class GeneratorConfig:
    """Retry caps and placement rules for level generation."""

    max_layout_attempts: int = MAX_LAYOUT_ATTEMPTS
    max_samples: int = MAX_SAMPLES
    keep_origin_clear: bool = True

    def __post_init__(self) -> None:
        if self.max_layout_attempts < 1:
            raise ValueError("max_layout_attempts must be >= 1")
        if self.max_samples < 1:
            raise ValueError("max_samples must be >= 1")


@dataclass(frozen=True)
class PursuitConfig:
    """Adversary pursuit knobs."""

    jitter: float = PURSUIT_JITTER

    def __post_init__(self) -> None:
        validate_jitter(self.jitter)


@dataclass(frozen=True)
class BenchmarkConfig:
    """Scripted-runner benchmark across levels and seeds."""

    levels: tuple[int, ...] = (1, 2, 3)
    n_seeds: int = 20
    seed_start: int = 0
    max_turns: int = DEFAULT_MAX_TURNS
    out_dir: Path = Path("data/benchmark")
    record_trajectories: bool = False
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    pursuit: PursuitConfig = field(default_factory=PursuitConfig)

    def __post_init__(self) -> None:
        if not self.levels:
            raise ValueError("levels must not be empty")
        if any(level < 1 for level in self.levels):
            raise ValueError("levels must be >= 1")
        if len(set(self.levels)) != len(self.levels):
            raise ValueError("levels must include distinct values")
        if self.n_seeds < 1:
            raise ValueError("n_seeds must be >= 1")
        if self.seed_start < 0:
            raise ValueError("seed_start must be >= 0")
        if self.max_turns < 1:
            raise ValueError("max_turns must be >= 1")

    @property
    def total_runs(self) -> int:
        return len(self.levels) * self.n_seeds
