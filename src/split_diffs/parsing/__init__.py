"""Parsers for diff header and hunk header lines."""

from split_diffs.parsing.file_headers import BINARY_FILES_DIFF_REGEX, FileHeaderTracker
from split_diffs.parsing.hunk_header import parse_hunk_header

__all__ = [
    "BINARY_FILES_DIFF_REGEX",
    "FileHeaderTracker",
    "parse_hunk_header",
]
