"""Visualization theme presets for board renderers.

Themes are frozen dataclasses that group all styling constants together so a
palette can be swapped via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of board style tokens."""

    empty_cell_color: str = "#1E1E2E"
    obstacle_color: str = "#6C7086"
    exit_color: str = "#F9E2AF"
    adversary_color: str = "#F38BA8"
    player_color: str = "#89B4FA"
    death_color: str = "#B00020"
    grid_line_color: str = "#45475A"
    player_path_color: str = "#CBA6F7"
    optimal_path_color: str = "#A6E3A1"
    background_color: str = "#11111B"
    text_color: str = "#CDD6F4"


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DARK_THEME = Theme()

LIGHT_THEME = Theme(
    empty_cell_color="#F0F0F0",
    obstacle_color="#7F7F7F",
    exit_color="#FFC107",
    adversary_color="#D62728",
    player_color="#1F77B4",
    death_color="#8B0000",
    grid_line_color="#CCCCCC",
    player_path_color="#9467BD",
    optimal_path_color="#2CA02C",
    background_color="#FFFFFF",
    text_color="#000000",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
