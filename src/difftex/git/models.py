"""Data models for line classification and document structure."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Mode(str, Enum):
    DIFF = "diff"  # single diff between two references
    LOG = "log"  # log-with-patches, one record per commit


class LineKind(str, Enum):
    COMMIT_HEADER = "commit_header"
    AUTHOR_OR_DATE = "author_or_date"
    FILE_DIFF_HEADER = "file_diff_header"
    FILE_HEADER_PATH = "file_header_path"
    HUNK_MARKER = "hunk_marker"
    ADDITION = "addition"
    DELETION = "deletion"
    CONTEXT = "context"


class SectionKind(str, Enum):
    COMMIT = "commit"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class Line:
    """A single classified row of input text."""

    raw: str
    kind: LineKind


@dataclass
class Section:
    """An open region of the output document."""

    kind: SectionKind
    label: str
    block_open: bool = False


@dataclass
class DocumentState:
    """Mutable traversal state for one conversion run."""

    stack: List[Section] = field(default_factory=list)
    commit_count: int = 0
    file_count: int = 0
    current_file: Optional[str] = None
    line_counts: Dict[LineKind, int] = field(default_factory=dict)

    @property
    def depth(self) -> int:
        return len(self.stack)

    @property
    def top(self) -> Optional[Section]:
        return self.stack[-1] if self.stack else None

    def count(self, kind: LineKind) -> None:
        self.line_counts[kind] = self.line_counts.get(kind, 0) + 1
