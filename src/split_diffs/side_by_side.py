"""Streaming side-by-side rendering of ``git log -p`` / ``git diff`` output."""

import logging
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator
from itertools import chain

from split_diffs.exceptions import MalformedHunkHeaderError
from split_diffs.models import Config, FileNamePair, HunkContext, ParserState, Theme
from split_diffs.parsing import FileHeaderTracker, parse_hunk_header
from split_diffs.parsing.hunk_header import HUNK_HEADER_PREFIX
from split_diffs.render import (
    ChangeBlockAccumulator,
    ColumnFormatter,
    format_commit_line,
    format_file_name,
    format_hunk_header,
    horizontal_separator,
)

logger = logging.getLogger(__name__)

COMMIT_PREFIX = "commit "
DIFF_PREFIX = "diff --git"


class SideBySideDiffProcessor:
    """Line-at-a-time state machine over diff output.

    Holds the config and theme for its lifetime and owns the per-stream
    state: the parser state, the current file names and the buffered hunk.
    Each call to :meth:`feed` updates that state immediately and returns a
    lazy iterator over the output lines the input line completed.
    """

    def __init__(self, config: Config, theme: Theme):
        self.config = config
        self.theme = theme
        self.formatter = ColumnFormatter(config, theme)
        self.file_headers = FileHeaderTracker()
        self.state = ParserState.COMMIT
        self.hunk: HunkContext | None = None

    @property
    def file_names(self) -> FileNamePair:
        return self.file_headers.file_names

    def reset(self) -> None:
        """Drop all per-stream state so the processor can start a new stream."""
        self.state = ParserState.COMMIT
        self.file_headers.reset()
        self.hunk = None

    def feed(self, line: str) -> Iterator[str]:
        """Consume one line of diff output.

        Raises:
            MalformedHunkHeaderError: While iterating the returned lines, once
                everything before a hunk header with unparsable ranges has
                been produced. The processor is reset and the stream is over.
        """
        line = line.rstrip("\r\n")
        pending: list[Iterable[str]] = []

        if line.startswith(COMMIT_PREFIX):
            closing_hunk = self.state == ParserState.HUNK
            pending.extend(self._flush())
            if closing_hunk:
                pending.append([horizontal_separator(self.config, self.theme)])
            self._transition(ParserState.COMMIT)
        elif line.startswith(DIFF_PREFIX):
            pending.extend(self._flush())
            self._transition(ParserState.DIFF_HEADER)
            self.file_headers.reset()
        elif line.startswith(HUNK_HEADER_PREFIX):
            try:
                hunk = parse_hunk_header(line)
            except MalformedHunkHeaderError as exc:
                pending.extend(self._flush())
                pending.append(_raise_after_output(exc))
                self.reset()
                return chain.from_iterable(pending)
            pending.extend(self._flush())
            self.hunk = hunk
            self._transition(ParserState.HUNK)
            return chain.from_iterable(pending)

        if self.state == ParserState.COMMIT:
            pending.append([format_commit_line(line, self.config, self.theme)])
        elif self.state == ParserState.DIFF_HEADER:
            self.file_headers.feed(line)
        elif self.hunk is not None:
            self.hunk.lines.append(line)

        return chain.from_iterable(pending)

    def finish(self) -> Iterator[str]:
        """Flush whatever is pending at the end of the stream and reset."""
        pending = self._flush()
        self.reset()
        return chain.from_iterable(pending)

    def _transition(self, state: ParserState) -> None:
        if state != self.state:
            logger.debug("Parser state %s -> %s", self.state.value, state.value)
        self.state = state

    def _flush(self) -> list[Iterable[str]]:
        if self.state == ParserState.DIFF_HEADER:
            names = self.file_names
            return [
                format_file_name(
                    names.file_name_a, names.file_name_b, self.config, self.theme
                )
            ]
        if self.state == ParserState.HUNK and self.hunk is not None:
            hunk, self.hunk = self.hunk, None
            return [self._render_hunk(hunk)]
        return []

    def _render_hunk(self, hunk: HunkContext) -> Iterator[str]:
        logger.debug(
            "Rendering hunk -%d +%d with %d lines",
            hunk.start_a,
            hunk.start_b,
            len(hunk.lines),
        )
        yield from format_hunk_header(hunk.header_line, self.config, self.theme)
        accumulator = ChangeBlockAccumulator.for_hunk(self.formatter, hunk)
        yield from accumulator.render(hunk.lines)


def _raise_after_output(error: Exception) -> Iterator[str]:
    raise error
    yield


def iter_side_by_side_diff(
    config: Config, theme: Theme
) -> Callable[[AsyncIterable[str]], AsyncIterator[str]]:
    """Build an async transformer from diff lines to side-by-side lines.

    The returned function pulls one input line at a time and yields each
    output line as soon as it is ready. Closing the returned generator stops
    reading from ``lines``.
    """

    async def transform(lines: AsyncIterable[str]) -> AsyncIterator[str]:
        processor = SideBySideDiffProcessor(config, theme)
        try:
            async for line in lines:
                for output in processor.feed(line):
                    yield output
            for output in processor.finish():
                yield output
        finally:
            processor.reset()

    return transform


def side_by_side_lines(
    lines: Iterable[str], config: Config, theme: Theme
) -> Iterator[str]:
    """Synchronous counterpart of :func:`iter_side_by_side_diff`."""
    processor = SideBySideDiffProcessor(config, theme)
    for line in lines:
        yield from processor.feed(line)
    yield from processor.finish()
