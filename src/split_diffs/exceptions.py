"""Exceptions for side-by-side diff rendering."""


class SplitDiffError(Exception):
    """Base exception for all split-diffs operations."""


class MalformedHunkHeaderError(SplitDiffError):
    """Raised when a hunk header's ranges cannot be parsed.

    The upstream diff format guarantees well-formed headers, so this aborts
    the whole stream.
    """

    def __init__(self, line: str):
        super().__init__(f"Malformed hunk header: {line!r}")
        self.line = line


class ConfigError(SplitDiffError):
    """Raised when a configuration value cannot be parsed."""


class ThemeError(SplitDiffError):
    """Raised when a theme cannot be found or loaded."""
