"""Breadth-first shortest paths on the 4-connected board.

Used to reject unsolvable obstacle layouts during generation and to report the
optimal path length once a level ends.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from zombie_escape.config.constants import MOVES
from zombie_escape.domain.grid import Coordinate, Grid, is_in_bounds, step


def shortest_path(
    start: Coordinate,
    target: Coordinate,
    obstacles: frozenset[Coordinate] | set[Coordinate],
    grid_size: int,
) -> list[Coordinate] | None:
    """Return a shortest path from *start* to *target* inclusive, or None.

    Neighbors are expanded in the fixed MOVES order (up, down, left, right),
    so the returned path is deterministic for a given board. Each cell is
    enqueued at most once.
    """
    if start == target:
        return [start]

    parents: dict[Coordinate, Coordinate | None] = {start: None}
    queue: deque[Coordinate] = deque([start])
    while queue:
        current = queue.popleft()
        for delta in MOVES:
            nxt = step(current, delta)
            if nxt in parents or nxt in obstacles or not is_in_bounds(nxt, grid_size):
                continue
            parents[nxt] = current
            if nxt == target:
                return _walk_back(parents, nxt)
            queue.append(nxt)
    return None


def _walk_back(parents: dict[Coordinate, Coordinate | None], end: Coordinate) -> list[Coordinate]:
    path: list[Coordinate] = []
    node: Coordinate | None = end
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return path


def path_length(path: Sequence[Coordinate] | None) -> int | None:
    """Number of moves along *path* (cells minus one), or None without a path."""
    if path is None:
        return None
    return len(path) - 1


def optimal_route(grid: Grid) -> list[Coordinate] | None:
    """Shortest route from the board's player start to its exit."""
    return shortest_path(grid.player_start, grid.exit, grid.obstacles, grid.size)
