"""Matplotlib rendering of a board snapshot with optional path overlays."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

from zombie_escape.domain.grid import Coordinate
from zombie_escape.domain.pathfinding import optimal_route
from zombie_escape.domain.state import GameState, GameStatus
from zombie_escape.viz.theme import DARK_THEME, Theme

# Cell codes, in draw priority order (later codes win).
EMPTY = 0
OBSTACLE = 1
EXIT = 2
ADVERSARY = 3
PLAYER = 4
DEATH = 5

_CELL_LABELS = ("Empty", "Obstacle", "Exit", "Zombie", "Player", "Caught")


def build_board_array(state: GameState) -> np.ndarray:
    """Return a (size, size) int array of cell codes for *state*.

    Priority matches the in-game board: death cell, player, adversary, exit,
    obstacle, empty.
    """
    size = state.grid.size
    board = np.full((size, size), EMPTY, dtype=int)
    for row, col in state.grid.obstacles:
        board[row, col] = OBSTACLE
    exit_row, exit_col = state.grid.exit
    board[exit_row, exit_col] = EXIT
    for row, col in state.adversaries:
        board[row, col] = ADVERSARY
    board[state.player] = PLAYER
    if state.death_position is not None:
        board[state.death_position] = DEATH
    return board


def _board_cmap(theme: Theme) -> tuple[ListedColormap, BoundaryNorm]:
    colors = [
        theme.empty_cell_color,
        theme.obstacle_color,
        theme.exit_color,
        theme.adversary_color,
        theme.player_color,
        theme.death_color,
    ]
    cmap = ListedColormap(colors)
    norm = BoundaryNorm([code - 0.5 for code in range(len(colors) + 1)], cmap.N)
    return cmap, norm


def _draw_path(
    ax: plt.Axes, path: Sequence[Coordinate], color: str, linewidth: float, label: str
) -> None:
    if len(path) < 2:
        return
    rows = [row for row, _ in path]
    cols = [col for _, col in path]
    ax.plot(cols, rows, color=color, linewidth=linewidth, alpha=0.8, label=label)


def render_board(
    state: GameState,
    output_path: Path,
    theme: Theme = DARK_THEME,
    show_player_path: bool = True,
    show_optimal_path: bool = False,
    dpi: int = 120,
) -> Path:
    """Render *state* to an image file and return the written path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    board = build_board_array(state)
    cmap, norm = _board_cmap(theme)
    size = state.grid.size

    fig, ax = plt.subplots(figsize=(0.5 * size + 2, 0.5 * size + 1))
    try:
        fig.patch.set_facecolor(theme.background_color)
        ax.imshow(board, cmap=cmap, norm=norm, origin="upper", aspect="equal")
        for edge in range(size + 1):
            ax.axvline(edge - 0.5, color=theme.grid_line_color, linewidth=0.5)
            ax.axhline(edge - 0.5, color=theme.grid_line_color, linewidth=0.5)
        ax.set_xticks([])
        ax.set_yticks([])

        if show_optimal_path:
            route = optimal_route(state.grid)
            if route is not None:
                _draw_path(ax, route, theme.optimal_path_color, 3.0, "Optimal path")
        if show_player_path:
            _draw_path(ax, state.player_path, theme.player_path_color, 1.5, "Path taken")

        title = f"Level {state.level} | moves {state.move_count}"
        if state.status is not GameStatus.PLAYING:
            title = f"{title} | {state.status.value}"
        ax.set_title(title, color=theme.text_color)

        handles = [
            Patch(facecolor=color, edgecolor="gray", label=label)
            for label, color in zip(_CELL_LABELS, cmap.colors, strict=True)
        ]
        ax.legend(
            handles=handles,
            loc="upper left",
            bbox_to_anchor=(1.02, 1.0),
            fontsize="small",
            frameon=False,
            labelcolor=theme.text_color,
        )
        fig.savefig(output_path, dpi=dpi, bbox_inches="tight", facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    return output_path
