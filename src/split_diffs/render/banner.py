"""Rendering of commit lines, file name banners and hunk headers."""

from collections.abc import Iterator

from split_diffs.models import Config, Theme
from split_diffs.render.line_wrapper import fit_text_to_width

INDICATOR = "■"
SEPARATOR = "─"


def horizontal_separator(config: Config, theme: Theme) -> str:
    """Full-width dashed rule in the border color."""
    return theme.border_color(SEPARATOR * config.screen_width)


def format_commit_line(line: str, config: Config, theme: Theme) -> str:
    """Color a commit metadata line, highlighting sha, author and date."""
    label = line.split(" ", 1)[0]
    label_colors = {
        "commit": theme.commit_sha_color,
        "Author:": theme.commit_author_color,
        "Date:": theme.commit_date_color,
    }
    label_color = label_colors.get(label)
    if label_color is None:
        return theme.commit_color(line.ljust(config.screen_width))

    return theme.commit_color(
        f"{label} {label_color(line[len(label) + 1:])}"
        + " " * (config.screen_width - len(line))
    )


def format_file_name(
    file_name_a: str, file_name_b: str, config: Config, theme: Theme
) -> Iterator[str]:
    """Yield the banner announcing a file: rule, name line, rule."""
    separator = horizontal_separator(config, theme)
    yield separator

    if not file_name_a:
        indicator = theme.inserted_line_color(INDICATOR * 2)
        label = file_name_b
    elif not file_name_b:
        indicator = theme.deleted_line_color(INDICATOR * 2)
        label = file_name_a
    elif file_name_a == file_name_b:
        indicator = theme.deleted_line_color(INDICATOR) + theme.inserted_line_color(INDICATOR)
        label = file_name_a
    else:
        indicator = theme.deleted_line_color(INDICATOR) + theme.inserted_line_color(INDICATOR)
        label = f"{file_name_a} -> {file_name_b}"

    yield (
        theme.file_name_color(" ")
        + indicator
        + theme.file_name_color(" " + label.ljust(config.screen_width - 2 - 2))
    )
    yield separator


def format_hunk_header(line: str, config: Config, theme: Theme) -> Iterator[str]:
    """Yield the hunk header line fitted to the screen width."""
    for segment in fit_text_to_width(line, config.screen_width, config.wrap_lines):
        yield theme.hunk_header_color(segment.ljust(config.screen_width))
