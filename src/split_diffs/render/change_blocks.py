"""Pairing a hunk's deletions and insertions into side-by-side rows."""

from collections.abc import Iterator
from itertools import chain

from split_diffs.models import HunkContext, HunkLineHalf
from split_diffs.render.columns import ColumnFormatter


class ChangeBlockAccumulator:
    """Splits a hunk body into change blocks and renders them row by row.

    Each contiguous run of removals and additions is a change starting at the
    same point on both sides, so deletions go on the left and insertions on
    the right, paired by position. The shorter side is left blank. Context
    lines are a block of their own, present on both sides.
    """

    def __init__(self, formatter: ColumnFormatter, line_no_a: int, line_no_b: int):
        self.formatter = formatter
        self.line_no_a = line_no_a
        self.line_no_b = line_no_b
        self.lines_a: list[str] = []
        self.lines_b: list[str] = []

    @classmethod
    def for_hunk(cls, formatter: ColumnFormatter, hunk: HunkContext) -> "ChangeBlockAccumulator":
        return cls(formatter, hunk.start_a, hunk.start_b)

    def add(self, line: str) -> Iterator[str]:
        """Accumulate one raw hunk line.

        Buffers and counters are updated immediately; the returned iterator
        lazily renders the rows of any block the line completed.
        """
        if line.startswith("-"):
            self.lines_a.append(line)
            return iter(())
        if line.startswith("+"):
            self.lines_b.append(line)
            return iter(())

        blocks = [self.flush()]
        self.lines_a = [line]
        self.lines_b = [line]
        blocks.append(self.flush())
        return chain.from_iterable(blocks)

    def flush(self) -> Iterator[str]:
        """Pair up the pending block, advance the line counters and return its rows."""
        lines_a, lines_b = self.lines_a, self.lines_b
        self.lines_a, self.lines_b = [], []

        pairs = []
        for index in range(max(len(lines_a), len(lines_b))):
            half_a: HunkLineHalf | None = None
            half_b: HunkLineHalf | None = None
            if index < len(lines_a):
                half_a = _make_half(self.line_no_a, lines_a[index])
                self.line_no_a += 1
            if index < len(lines_b):
                half_b = _make_half(self.line_no_b, lines_b[index])
                self.line_no_b += 1
            pairs.append((half_a, half_b))

        return chain.from_iterable(
            self.formatter.format_row(half_a, half_b) for half_a, half_b in pairs
        )

    def render(self, lines: list[str]) -> Iterator[str]:
        """Render a whole hunk body, flushing the final block at the end."""
        blocks = [self.add(line) for line in lines]
        blocks.append(self.flush())
        return chain.from_iterable(blocks)


def _make_half(number: int, line: str) -> HunkLineHalf:
    return HunkLineHalf(number=number, prefix=line[:1], text=line[1:])
