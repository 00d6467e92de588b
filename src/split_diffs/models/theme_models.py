"""Theme models: color functions keyed by line role."""

from typing import Callable

from pydantic import BaseModel, ConfigDict

from split_diffs.models.diff_models import LineRole

ThemeColor = Callable[[str], str]


def _identity(text: str) -> str:
    return text


class Theme(BaseModel):
    """One color-application function per line role.

    Every field is a pure ``str -> str`` function.
    """

    model_config = ConfigDict(frozen=True)

    commit_color: ThemeColor
    commit_sha_color: ThemeColor
    commit_author_color: ThemeColor
    commit_date_color: ThemeColor
    border_color: ThemeColor
    file_name_color: ThemeColor
    hunk_header_color: ThemeColor
    deleted_line_color: ThemeColor
    deleted_line_no_color: ThemeColor
    inserted_line_color: ThemeColor
    inserted_line_no_color: ThemeColor
    unmodified_line_color: ThemeColor
    unmodified_line_no_color: ThemeColor
    missing_line_color: ThemeColor

    @classmethod
    def plain(cls) -> "Theme":
        """Theme that leaves every string uncolored."""
        return cls(**{name: _identity for name in cls.model_fields})

    def line_colors(self, role: LineRole) -> tuple[ThemeColor, ThemeColor]:
        """Return the (text color, line-number color) pair for a role."""
        if role == LineRole.DELETED:
            return self.deleted_line_color, self.deleted_line_no_color
        if role == LineRole.INSERTED:
            return self.inserted_line_color, self.inserted_line_no_color
        if role == LineRole.UNMODIFIED:
            return self.unmodified_line_color, self.unmodified_line_no_color
        return self.missing_line_color, self.missing_line_color


class ThemeDefinition(BaseModel):
    """Serializable theme: a rich style string per role (empty = no style)."""

    model_config = ConfigDict(frozen=True)

    commit_color: str = ""
    commit_sha_color: str = ""
    commit_author_color: str = ""
    commit_date_color: str = ""
    border_color: str = ""
    file_name_color: str = ""
    hunk_header_color: str = ""
    deleted_line_color: str = ""
    deleted_line_no_color: str = ""
    inserted_line_color: str = ""
    inserted_line_no_color: str = ""
    unmodified_line_color: str = ""
    unmodified_line_no_color: str = ""
    missing_line_color: str = ""
