"""Exceptions raised by level generation."""

from __future__ import annotations


class InvalidLevelError(ValueError):
    """Raised when a level number is not a positive integer."""

    def __init__(self, level: object) -> None:
        super().__init__(f"level must be a positive integer, got {level!r}")
        self.level = level


class GenerationExhaustedError(RuntimeError):
    """Raised when a sampling loop hits its retry cap without converging.

    ``stage`` names the loop that gave up (``"obstacles"`` or
    ``"adversaries"``) and ``attempts`` how many tries it made.
    """

    def __init__(self, stage: str, attempts: int, detail: str = "") -> None:
        message = f"{stage} generation exhausted after {attempts} attempts"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.stage = stage
        self.attempts = attempts
