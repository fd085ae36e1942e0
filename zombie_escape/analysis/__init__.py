"""Analysis helpers for finished level attempts."""

from zombie_escape.analysis.stats import LevelStats, build_level_stats, format_path

__all__ = ["LevelStats", "build_level_stats", "format_path"]
