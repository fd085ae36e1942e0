"""Level progression around the turn controller.

A :class:`GameSession` owns the current level number and the current
:class:`GameState` snapshot. It regenerates state on retry, advance and
restart; score and timing stay with the caller.
"""

from __future__ import annotations

import logging
from random import Random

from zombie_escape.analysis.stats import LevelStats, build_level_stats
from zombie_escape.config.types import GeneratorConfig, PursuitConfig
from zombie_escape.domain.grid import Coordinate, Direction
from zombie_escape.domain.state import GameState, GameStatus, MoveOutcome
from zombie_escape.generation.level import initialize_level
from zombie_escape.simulation.controller import request_move

logger = logging.getLogger(__name__)


class GameSession:
    """Single-player session spanning successive levels."""

    def __init__(
        self,
        level: int = 1,
        rng: Random | None = None,
        generator: GeneratorConfig | None = None,
        pursuit: PursuitConfig | None = None,
    ) -> None:
        self.rng = rng if rng is not None else Random()
        self.generator = generator or GeneratorConfig()
        self.pursuit = pursuit or PursuitConfig()
        self.state = self._generate(level)

    @property
    def level(self) -> int:
        return self.state.level

    def _generate(self, level: int) -> GameState:
        state = initialize_level(level, rng=self.rng, config=self.generator)
        logger.info(
            "level %d ready: size=%d obstacles=%d adversaries=%d",
            level,
            state.grid.size,
            len(state.grid.obstacles),
            len(state.adversaries),
        )
        return state

    def move(self, direction: Direction | Coordinate | str) -> MoveOutcome:
        self.state, outcome = request_move(
            self.state, direction, rng=self.rng, jitter=self.pursuit.jitter
        )
        if outcome is MoveOutcome.WON:
            logger.info("level %d won in %d moves", self.level, self.state.move_count)
        elif outcome is MoveOutcome.LOST:
            logger.info("level %d lost at %s", self.level, self.state.death_position)
        return outcome

    def retry_level(self) -> GameState:
        self.state = self._generate(self.level)
        return self.state

    def next_level(self) -> GameState:
        """Advance to the following level; only allowed after a win."""
        if self.state.status is not GameStatus.WON:
            raise ValueError("next_level requires the current level to be won")
        self.state = self._generate(self.level + 1)
        return self.state

    def restart(self) -> GameState:
        self.state = self._generate(1)
        return self.state

    def stats(self, elapsed_seconds: float | None = None) -> LevelStats:
        return build_level_stats(self.state, elapsed_seconds=elapsed_seconds)
