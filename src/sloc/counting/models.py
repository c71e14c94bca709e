"""Data models for line counting."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

TOTAL_LABEL = "TOTAL"


class LineKind(Enum):
    """Category of one physical line."""

    BLANK = "blank"
    COMMENT = "comment"
    CODE = "code"


@dataclass(frozen=True)
class ClassifierState:
    """State carried from one line to the next within a single file."""

    in_block_comment: bool = False


@dataclass(frozen=True)
class FileRecord:
    """Line counts for one file.

    ``code_lines + comment_lines + whitespace_lines`` equals the number of
    physical lines read from the file.
    """

    filename: str
    code_lines: int = 0
    comment_lines: int = 0
    whitespace_lines: int = 0

    @property
    def total_lines(self) -> int:
        return self.code_lines + self.comment_lines + self.whitespace_lines

    def join(self, other: FileRecord) -> FileRecord:
        """Return the elementwise sum, keeping this record's filename."""
        return FileRecord(
            filename=self.filename,
            code_lines=self.code_lines + other.code_lines,
            comment_lines=self.comment_lines + other.comment_lines,
            whitespace_lines=self.whitespace_lines + other.whitespace_lines,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "filename": self.filename,
            "whitespace": self.whitespace_lines,
            "comment": self.comment_lines,
            "code": self.code_lines,
        }


@dataclass
class Report:
    """Per-file rows in arrival order plus one total row."""

    rows: list[FileRecord] = field(default_factory=list)
    total: FileRecord = field(default_factory=lambda: FileRecord(filename=TOTAL_LABEL))

    @property
    def file_count(self) -> int:
        return len(self.rows)

    def to_dict(self) -> dict[str, Any]:
        return {
            "files": [row.to_dict() for row in self.rows],
            "total": self.total.to_dict(),
        }
