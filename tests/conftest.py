import asyncio

import pytest

from split_diffs.models import Config, Theme

LINE_WIDTH = 20


def _tag(name: str):
    def apply(text: str) -> str:
        return f"<{name}>{text}</{name}>"

    return apply


@pytest.fixture
def config():
    """40 columns: each side is 20 wide with 15 columns of text."""
    return Config(
        screen_width=40,
        line_number_width=2,
        line_prefix_width=1,
        min_line_width=0,
        wrap_lines=True,
    )


@pytest.fixture
def truncating_config(config):
    return config.model_copy(update={"wrap_lines": False})


@pytest.fixture
def plain_theme():
    return Theme.plain()


@pytest.fixture
def tagging_theme():
    """Theme wrapping each string in a tag naming its role."""
    return Theme(**{name: _tag(name) for name in Theme.model_fields})


@pytest.fixture
def split_row():
    """Tokens of the left and right halves of an uncolored hunk row."""

    def split(row: str) -> tuple[list[str], list[str]]:
        return row[:LINE_WIDTH].split(), row[LINE_WIDTH:].split()

    return split


@pytest.fixture
def collect_async():
    """Run an async transformer over a list of lines and collect its output."""

    def collect(transform, lines: list[str]) -> list[str]:
        async def source():
            for line in lines:
                yield line

        async def run():
            return [output async for output in transform(source())]

        return asyncio.run(run())

    return collect
