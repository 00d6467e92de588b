"""Rendering configuration."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LINE_NUMBER_WIDTH = 5
DEFAULT_LINE_PREFIX_WIDTH = 2
DEFAULT_MIN_LINE_WIDTH = 80


class Config(BaseModel):
    """Layout settings for one rendering run.

    Each hunk row is laid out as
    ``<lineNo> <prefix> <text><lineNo> <prefix> <text>`` so that
    ``(line_number_width + 1 + line_prefix_width + 1 + line_text_width) * 2``
    fills the screen.
    """

    model_config = ConfigDict(frozen=True)

    screen_width: int = Field(gt=0)
    line_number_width: int = Field(default=DEFAULT_LINE_NUMBER_WIDTH, ge=0)
    line_prefix_width: int = Field(default=DEFAULT_LINE_PREFIX_WIDTH, ge=0)
    min_line_width: int = Field(default=DEFAULT_MIN_LINE_WIDTH, ge=0)
    wrap_lines: bool = True

    @property
    def line_width(self) -> int:
        """Width of one side of the split view."""
        return max(self.screen_width // 2, self.min_line_width)

    @property
    def line_text_width(self) -> int:
        """Width left for line text once number and prefix are laid out."""
        return max(
            self.line_width - 1 - self.line_prefix_width - 1 - self.line_number_width,
            0,
        )
