"""Git interface layer — adapter, line classifier, models."""

from difftex.git.adapter import GitError, get_diff, get_log, get_repo_root
from difftex.git.classifier import classify, commit_id, file_path
from difftex.git.models import (
    DocumentState,
    Line,
    LineKind,
    Mode,
    Section,
    SectionKind,
)

__all__ = [
    "DocumentState",
    "GitError",
    "Line",
    "LineKind",
    "Mode",
    "Section",
    "SectionKind",
    "classify",
    "commit_id",
    "file_path",
    "get_diff",
    "get_log",
    "get_repo_root",
]
