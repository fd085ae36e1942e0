"""Procedural level generation with solvability guarantees.

Levels scale in three dimensions: board size, obstacle count and adversary
count. Obstacle layouts are drawn by rejection sampling and discarded wholesale
when the exit becomes unreachable from the player start. Adversary starts are
rejection-sampled against spacing constraints. Both loops are capped by
:class:`GeneratorConfig` and raise :class:`GenerationExhaustedError` rather
than spinning forever.
"""

from __future__ import annotations

import logging
import math
from random import Random

from zombie_escape.config.constants import (
    ADVERSARY_COUNT_STEPS,
    ADVERSARY_MIN_SPACING,
    BASE_OBSTACLES,
    GRID_SIZE_STEPS,
    MAX_ADVERSARIES,
    MAX_GRID_SIZE,
    OBSTACLES_PER_LEVEL,
    PLAYER_CLEARANCE_DIVISOR,
)
from zombie_escape.config.types import GeneratorConfig
from zombie_escape.domain.errors import GenerationExhaustedError, InvalidLevelError
from zombie_escape.domain.grid import Coordinate, Grid, manhattan_distance, player_start_for
from zombie_escape.domain.pathfinding import shortest_path
from zombie_escape.domain.state import GameState

logger = logging.getLogger(__name__)

ORIGIN: Coordinate = (0, 0)


def _validate_level(level: int) -> int:
    # bool is an int subclass but never a meaningful level
    if isinstance(level, bool) or not isinstance(level, int) or level < 1:
        raise InvalidLevelError(level)
    return level


def _step_lookup(level: int, steps: tuple[tuple[int, int], ...], top: int) -> int:
    for max_level, value in steps:
        if level <= max_level:
            return value
    return top


def grid_size_for_level(level: int) -> int:
    """Board side length: 6 at level 1, 8 at 2-4, 10 at 5-7, 12 from level 8."""
    return _step_lookup(_validate_level(level), GRID_SIZE_STEPS, MAX_GRID_SIZE)


def adversary_count_for_level(level: int) -> int:
    """Adversary count: 1 at level 1, 2 at 2-4, 3 at 5-8, 4 from level 9."""
    return _step_lookup(_validate_level(level), ADVERSARY_COUNT_STEPS, MAX_ADVERSARIES)


def obstacle_target_for_level(level: int) -> int:
    return BASE_OBSTACLES + math.floor(_validate_level(level) * OBSTACLES_PER_LEVEL)


def _random_cell(grid_size: int, rng: Random) -> Coordinate:
    return (rng.randrange(grid_size), rng.randrange(grid_size))


def generate_exit(grid_size: int, rng: Random) -> Coordinate:
    """Pick a uniformly random cell other than the player start."""
    player_start = player_start_for(grid_size)
    while True:
        cell = _random_cell(grid_size, rng)
        if cell != player_start:
            return cell


def generate_obstacles(
    exit: Coordinate,
    grid_size: int,
    level: int,
    rng: Random,
    config: GeneratorConfig | None = None,
) -> frozenset[Coordinate]:
    """Sample a solvable obstacle set for *level*.

    Cells are drawn uniformly, excluding the player start, the exit and (when
    ``keep_origin_clear`` is set) the top-left corner, until the target count
    is reached. Layouts that cut the start off from the exit are discarded and
    resampled from empty.
    """
    cfg = config or GeneratorConfig()
    target = obstacle_target_for_level(level)
    player_start = player_start_for(grid_size)
    reserved = {player_start, exit}
    if cfg.keep_origin_clear:
        reserved.add(ORIGIN)

    eligible = grid_size * grid_size - len(reserved)
    if target > eligible:
        raise GenerationExhaustedError(
            "obstacles",
            0,
            f"{target} obstacles requested but only {eligible} cells are eligible",
        )

    for attempt in range(1, cfg.max_layout_attempts + 1):
        obstacles: set[Coordinate] = set()
        draws = 0
        while len(obstacles) < target:
            if draws >= cfg.max_samples:
                raise GenerationExhaustedError(
                    "obstacles", attempt, f"layout did not fill after {draws} draws"
                )
            draws += 1
            cell = _random_cell(grid_size, rng)
            if cell not in reserved:
                obstacles.add(cell)

        if shortest_path(player_start, exit, obstacles, grid_size) is not None:
            logger.debug(
                "obstacle layout accepted: level=%d size=%d attempts=%d", level, grid_size, attempt
            )
            return frozenset(obstacles)

    raise GenerationExhaustedError(
        "obstacles", cfg.max_layout_attempts, "no layout kept the exit reachable"
    )


def place_adversaries(
    player: Coordinate,
    obstacles: frozenset[Coordinate],
    grid_size: int,
    level: int,
    rng: Random,
    config: GeneratorConfig | None = None,
) -> tuple[Coordinate, ...]:
    """Sample adversary starts that keep their distance from the player and each other.

    A candidate is accepted iff it is not an obstacle, lies at least
    ``grid_size // 3`` from *player* and at least 2 from every adversary
    already placed.
    """
    cfg = config or GeneratorConfig()
    count = adversary_count_for_level(level)
    min_player_distance = grid_size // PLAYER_CLEARANCE_DIVISOR

    placed: list[Coordinate] = []
    draws = 0
    while len(placed) < count:
        if draws >= cfg.max_samples:
            raise GenerationExhaustedError(
                "adversaries", draws, f"placed {len(placed)} of {count}"
            )
        draws += 1
        cell = _random_cell(grid_size, rng)
        if cell in obstacles:
            continue
        if manhattan_distance(cell, player) < min_player_distance:
            continue
        if any(manhattan_distance(cell, other) < ADVERSARY_MIN_SPACING for other in placed):
            continue
        placed.append(cell)

    logger.debug("adversaries placed: count=%d draws=%d", count, draws)
    return tuple(placed)


def initialize_level(
    level: int,
    rng: Random | None = None,
    config: GeneratorConfig | None = None,
) -> GameState:
    """Generate a fresh, solvable GameState for *level*."""
    _validate_level(level)
    rng = rng if rng is not None else Random()
    cfg = config or GeneratorConfig()

    grid_size = grid_size_for_level(level)
    exit_cell = generate_exit(grid_size, rng)
    obstacles = generate_obstacles(exit_cell, grid_size, level, rng, cfg)
    grid = Grid(size=grid_size, obstacles=obstacles, exit=exit_cell)
    player = grid.player_start
    adversaries = place_adversaries(player, obstacles, grid_size, level, rng, cfg)

    return GameState(
        level=level,
        grid=grid,
        player=player,
        adversaries=adversaries,
        player_path=(player,),
    )
