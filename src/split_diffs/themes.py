"""Built-in themes and loading of theme definitions."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from split_diffs.exceptions import ThemeError
from split_diffs.models import Theme, ThemeColor, ThemeDefinition

DEFAULT_THEME_NAME = "dark"

DARK_THEME = ThemeDefinition(
    commit_color="#d0d0d0",
    commit_sha_color="bold #ffaf00",
    commit_author_color="#5fafff",
    commit_date_color="#87af87",
    border_color="#4e4e4e",
    file_name_color="bold #eeeeee on #262626",
    hunk_header_color="#8a8a8a on #1c1c2e",
    deleted_line_color="#ffd7d7 on #3f1f1f",
    deleted_line_no_color="#ff8787 on #2e1616",
    inserted_line_color="#d7ffd7 on #1f3f1f",
    inserted_line_no_color="#87ff87 on #162e16",
    unmodified_line_color="#d0d0d0",
    unmodified_line_no_color="#6c6c6c",
    missing_line_color="on #1c1c1c",
)

LIGHT_THEME = ThemeDefinition(
    commit_color="#303030",
    commit_sha_color="bold #af5f00",
    commit_author_color="#005faf",
    commit_date_color="#5f875f",
    border_color="#bcbcbc",
    file_name_color="bold #121212 on #e4e4e4",
    hunk_header_color="#6c6c6c on #eeeeff",
    deleted_line_color="#5f0000 on #ffe0e0",
    deleted_line_no_color="#af0000 on #ffd0d0",
    inserted_line_color="#005f00 on #e0ffe0",
    inserted_line_no_color="#008700 on #d0ffd0",
    unmodified_line_color="#303030",
    unmodified_line_no_color="#8a8a8a",
    missing_line_color="on #f2f2f2",
)

BUILTIN_THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}


def _style_color(style_definition: str) -> ThemeColor:
    if not style_definition:
        return lambda text: text
    try:
        style = Style.parse(style_definition)
    except StyleSyntaxError as exc:
        raise ThemeError(f"Invalid style {style_definition!r}: {exc}") from exc

    def apply(text: str) -> str:
        return style.render(text, color_system=ColorSystem.TRUECOLOR)

    return apply


def build_theme(definition: ThemeDefinition) -> Theme:
    """Turn style strings into ANSI color functions."""
    colors = {
        name: _style_color(style_definition)
        for name, style_definition in definition.model_dump().items()
    }
    return Theme(**colors)


def load_theme(name_or_path: str | None = None) -> Theme:
    """Load a built-in theme by name, or a JSON theme definition by path.

    Defaults to ``$SPLIT_DIFFS_THEME`` (also read from a ``.env`` file), then
    ``dark``.

    Raises:
        ThemeError: If the theme is unknown or its file is invalid.
    """
    if name_or_path is None:
        load_dotenv()
        name_or_path = os.getenv("SPLIT_DIFFS_THEME", DEFAULT_THEME_NAME)

    if name_or_path in BUILTIN_THEMES:
        return build_theme(BUILTIN_THEMES[name_or_path])

    path = Path(name_or_path)
    if not path.is_file():
        known = ", ".join(sorted(BUILTIN_THEMES))
        raise ThemeError(f"Unknown theme '{name_or_path}' (built-in themes: {known})")

    try:
        definition = ThemeDefinition.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        raise ThemeError(f"Could not load theme from {path}: {exc}") from exc
    return build_theme(definition)
