"""Parsing of ``@@ -a,b +c,d @@`` hunk headers."""

import re

from split_diffs.exceptions import MalformedHunkHeaderError
from split_diffs.models import HunkContext

HUNK_HEADER_PREFIX = "@@"

HUNK_HEADER_REGEX = re.compile(r"^@@ -(\d+)(?:,\d+)? \+(\d+)(?:,\d+)? @@")


def parse_hunk_header(line: str) -> HunkContext:
    """Create the hunk context declared by a header line.

    Raises:
        MalformedHunkHeaderError: If the ranges are not ``-n[,c] +n[,c]``.
    """
    match = HUNK_HEADER_REGEX.match(line)
    if match is None:
        raise MalformedHunkHeaderError(line)
    return HunkContext(
        start_a=int(match.group(1)),
        start_b=int(match.group(2)),
        header_line=line,
    )
