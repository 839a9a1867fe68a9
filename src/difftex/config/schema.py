"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field

from difftex.git.models import Mode

DEFAULT_OUTPUT_PATHS: dict[Mode, str] = {
    Mode.DIFF: "git-diff.tex",
    Mode.LOG: "git-log.tex",
}


@dataclass
class GitConfig:
    ref: str = "HEAD"
    unified: int = 3  # context lines around each hunk
    max_count: int = 0  # log only; 0 = unlimited
    timeout: int = 60


@dataclass
class OutputConfig:
    path: str = ""  # empty = per-mode default

    def resolve(self, mode: Mode) -> str:
        return self.path or DEFAULT_OUTPUT_PATHS[mode]


@dataclass
class DocumentConfig:
    title: str = ""  # empty = per-mode default
    author: str = "Generated from Git Repository"
    commit_id_width: int = 8


@dataclass
class DiffTexConfig:
    git: GitConfig = field(default_factory=GitConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    document: DocumentConfig = field(default_factory=DocumentConfig)
