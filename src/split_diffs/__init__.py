"""Side-by-side, colorized rendering of git diff output for the terminal."""

from split_diffs.config import load_config
from split_diffs.exceptions import (
    ConfigError,
    MalformedHunkHeaderError,
    SplitDiffError,
    ThemeError,
)
from split_diffs.models import Config, Theme, ThemeDefinition
from split_diffs.side_by_side import (
    SideBySideDiffProcessor,
    iter_side_by_side_diff,
    side_by_side_lines,
)
from split_diffs.themes import build_theme, load_theme

__all__ = [
    "Config",
    "ConfigError",
    "MalformedHunkHeaderError",
    "SideBySideDiffProcessor",
    "SplitDiffError",
    "Theme",
    "ThemeDefinition",
    "ThemeError",
    "build_theme",
    "iter_side_by_side_diff",
    "load_config",
    "load_theme",
    "side_by_side_lines",
]
