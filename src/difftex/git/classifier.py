"""Prefix-based line classifier for git diff and git log output.

Rules are evaluated in a fixed priority order, first match wins. A line
starting with ``+++`` is a file header, never an addition, because the file
header rule is checked before the single-character rules.
"""

from __future__ import annotations

from typing import Optional, Tuple

from difftex.git.models import LineKind, Mode

COMMIT_PREFIX = "commit "
METADATA_PREFIXES = ("Author:", "Date:", "Merge:")
DIFF_HEADER_PREFIX = "diff --git"
FILE_PATH_PREFIXES = ("+++", "---")
HUNK_PREFIX = "@@"
OLD_TREE_PREFIX = "a/"

DEFAULT_COMMIT_ID_WIDTH = 8

# (kind, prefixes, log mode only)
_RULES: Tuple[Tuple[LineKind, Tuple[str, ...], bool], ...] = (
    (LineKind.COMMIT_HEADER, (COMMIT_PREFIX,), True),
    (LineKind.AUTHOR_OR_DATE, METADATA_PREFIXES, True),
    (LineKind.FILE_DIFF_HEADER, (DIFF_HEADER_PREFIX,), False),
    (LineKind.FILE_HEADER_PATH, FILE_PATH_PREFIXES, False),
    (LineKind.HUNK_MARKER, (HUNK_PREFIX,), False),
    (LineKind.ADDITION, ("+",), False),
    (LineKind.DELETION, ("-",), False),
)


def classify(line: str, mode: Mode) -> LineKind:
    """Return the :class:`LineKind` of *line* under *mode*."""
    for kind, prefixes, log_only in _RULES:
        if log_only and mode is not Mode.LOG:
            continue
        if line.startswith(prefixes):
            return kind
    return LineKind.CONTEXT


def commit_id(line: str, width: int = DEFAULT_COMMIT_ID_WIDTH) -> str:
    """Return the commit identifier of a commit header, truncated to *width*."""
    parts = line.split()
    if len(parts) < 2:
        return ""
    return parts[1][:width]


def file_path(line: str) -> Optional[str]:
    """Return the old-tree path of a ``diff --git a/x b/x`` header.

    Returns ``None`` when the header has too few tokens to carry a path.
    """
    parts = line.split(" ")
    if len(parts) < 4:
        return None
    path = parts[2]
    if path.startswith(OLD_TREE_PREFIX):
        path = path[len(OLD_TREE_PREFIX):]
    return path
