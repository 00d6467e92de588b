"""Rendering helpers for the side-by-side layout."""

from split_diffs.render.banner import (
    format_commit_line,
    format_file_name,
    format_hunk_header,
    horizontal_separator,
)
from split_diffs.render.change_blocks import ChangeBlockAccumulator
from split_diffs.render.columns import ColumnFormatter, align_rows
from split_diffs.render.line_wrapper import (
    FittedText,
    fit_text_to_width,
    wrap_line_by_word,
)

__all__ = [
    "ChangeBlockAccumulator",
    "ColumnFormatter",
    "FittedText",
    "align_rows",
    "fit_text_to_width",
    "format_commit_line",
    "format_file_name",
    "format_hunk_header",
    "horizontal_separator",
    "wrap_line_by_word",
]
