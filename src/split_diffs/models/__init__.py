"""Data models for split-diffs."""

from split_diffs.models.config_models import Config
from split_diffs.models.diff_models import (
    FileNamePair,
    HunkContext,
    HunkLineHalf,
    LineRole,
    ParserState,
    role_for_half,
)
from split_diffs.models.theme_models import Theme, ThemeColor, ThemeDefinition

__all__ = [
    "Config",
    "FileNamePair",
    "HunkContext",
    "HunkLineHalf",
    "LineRole",
    "ParserState",
    "Theme",
    "ThemeColor",
    "ThemeDefinition",
    "role_for_half",
]
