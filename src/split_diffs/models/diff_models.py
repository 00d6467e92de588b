"""Models for the per-stream parser state."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ParserState(str, Enum):
    """Section of the diff output currently being read."""

    COMMIT = "commit"
    DIFF_HEADER = "diff_header"
    HUNK = "hunk"


class LineRole(str, Enum):
    """Role of one side of a rendered hunk row."""

    DELETED = "deleted"
    INSERTED = "inserted"
    UNMODIFIED = "unmodified"
    MISSING = "missing"


class FileNamePair(BaseModel):
    """Old and new file names collected from a diff header."""

    model_config = ConfigDict(frozen=False)

    file_name_a: str = ""
    file_name_b: str = ""

    def reset(self) -> None:
        self.file_name_a = ""
        self.file_name_b = ""


class HunkContext(BaseModel):
    """A hunk being buffered until the next transition."""

    model_config = ConfigDict(frozen=False)

    start_a: int = Field(ge=0)
    start_b: int = Field(ge=0)
    header_line: str
    lines: list[str] = Field(default_factory=list)


class HunkLineHalf(BaseModel):
    """One side's view of a hunk row."""

    model_config = ConfigDict(frozen=True)

    number: int
    prefix: str
    text: str

    @property
    def role(self) -> LineRole:
        if self.prefix == "-":
            return LineRole.DELETED
        if self.prefix == "+":
            return LineRole.INSERTED
        return LineRole.UNMODIFIED


def role_for_half(half: HunkLineHalf | None) -> LineRole:
    """Role of a line-half, ``MISSING`` when the side has no row."""
    if half is None:
        return LineRole.MISSING
    return half.role
