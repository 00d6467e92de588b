"""Wrapping and truncating text to a fixed column width."""

import re
from collections.abc import Iterator

# A word plus the whitespace that follows it, or a leading whitespace run.
_WORD_REGEX = re.compile(r"\S+\s*|\s+")


def wrap_line_by_word(text: str, width: int) -> Iterator[str]:
    """Break text at word boundaries into segments no wider than ``width``.

    Whitespace falling on a break is dropped. Words longer than ``width`` are
    hard-split. Always yields at least one segment.
    """
    if width <= 0:
        yield ""
        return
    if len(text) <= width:
        yield text
        return

    current = ""
    for word in _WORD_REGEX.findall(text):
        if len(current) + len(word) <= width:
            current += word
            continue

        stripped = word.rstrip()
        if stripped and len(current) + len(stripped) <= width:
            yield current + stripped
            current = ""
            continue

        if current.strip():
            yield current.rstrip()
            current = ""
        current += word
        while len(current) > width:
            yield current[:width]
            current = current[width:]
        if not current.strip():
            current = ""

    if current:
        yield current


class FittedText:
    """Restartable, lazy sequence of the segments for one line of text."""

    def __init__(self, text: str, width: int, wrap_lines: bool):
        self.text = text
        self.width = width
        self.wrap_lines = wrap_lines

    def __iter__(self) -> Iterator[str]:
        if self.wrap_lines:
            return wrap_line_by_word(self.text, self.width)
        return iter((self.text[: max(self.width, 0)],))

    def __repr__(self) -> str:
        return f"FittedText({self.text!r}, width={self.width}, wrap_lines={self.wrap_lines})"


def fit_text_to_width(text: str, width: int, wrap_lines: bool) -> FittedText:
    """Wrap or truncate ``text`` to ``width`` depending on ``wrap_lines``."""
    return FittedText(text, width, wrap_lines)
