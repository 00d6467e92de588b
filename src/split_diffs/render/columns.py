"""Fixed-width column rendering for each side of a hunk row."""

from split_diffs.models import Config, HunkLineHalf, Theme, ThemeColor, role_for_half
from split_diffs.render.line_wrapper import fit_text_to_width


def align_rows(
    left: list[str],
    right: list[str],
    left_color: ThemeColor,
    right_color: ThemeColor,
    line_width: int,
) -> list[str]:
    """Join left and right columns into full-width rows.

    The shorter side is padded with blank rows in its own color so both
    sides stay vertically in step.
    """
    blank_line = " " * line_width
    rows = []
    for index in range(max(len(left), len(right))):
        left_part = left[index] if index < len(left) else left_color(blank_line)
        right_part = right[index] if index < len(right) else right_color(blank_line)
        rows.append(left_part + right_part)
    return rows


class ColumnFormatter:
    """Renders line-halves into colored columns of ``config.line_width``."""

    def __init__(self, config: Config, theme: Theme):
        self.config = config
        self.theme = theme

    def format_column(
        self,
        line_no: str,
        prefix: str,
        text: str,
        line_color: ThemeColor,
        line_no_color: ThemeColor,
    ) -> str:
        config = self.config
        return "".join(
            [
                line_no_color(line_no.rjust(config.line_number_width)),
                line_color(" " + prefix.rjust(config.line_prefix_width)),
                line_color(" " + text.ljust(config.line_text_width)),
            ]
        )

    def format_half(self, half: HunkLineHalf | None) -> list[str]:
        """Render one line-half, one column string per wrapped segment.

        Only the first segment shows the line number and prefix.
        """
        line_color, line_no_color = self.theme.line_colors(role_for_half(half))
        line_no = str(half.number) if half is not None else ""
        prefix = half.prefix if half is not None else ""
        text = half.text if half is not None else ""

        columns = []
        segments = fit_text_to_width(
            text, self.config.line_text_width, self.config.wrap_lines
        )
        for segment in segments:
            if columns:
                line_no = prefix = ""
            columns.append(
                self.format_column(line_no, prefix, segment, line_color, line_no_color)
            )
        return columns

    def format_row(
        self, half_a: HunkLineHalf | None, half_b: HunkLineHalf | None
    ) -> list[str]:
        """Render a side-by-side row, wrapping each side independently."""
        color_a, _ = self.theme.line_colors(role_for_half(half_a))
        color_b, _ = self.theme.line_colors(role_for_half(half_b))
        return align_rows(
            self.format_half(half_a),
            self.format_half(half_b),
            color_a,
            color_b,
            self.config.line_width,
        )
