"""Visualization subpackage: themes and board rendering."""

from zombie_escape.viz.render import build_board_array, render_board
from zombie_escape.viz.theme import DARK_THEME, LIGHT_THEME, Theme, get_theme

__all__ = [
    "DARK_THEME",
    "LIGHT_THEME",
    "Theme",
    "build_board_array",
    "get_theme",
    "render_board",
]
