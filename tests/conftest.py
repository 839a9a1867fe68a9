"""Shared test fixtures — sample diffs, sample logs, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_diff_single() -> str:
    """One file with one addition and one removal."""
    return textwrap.dedent("""\
        diff --git a/foo.go b/foo.go
        index 1234567..abcdef0 100644
        --- a/foo.go
        +++ b/foo.go
        @@ -1,3 +1,3 @@
         package main
        +added line
        -removed line
    """)


@pytest.fixture
def sample_diff_two_files() -> str:
    """Two files changed in one diff."""
    return textwrap.dedent("""\
        diff --git a/src/app_config.py b/src/app_config.py
        index 1234567..abcdef0 100644
        --- a/src/app_config.py
        +++ b/src/app_config.py
        @@ -10,2 +10,2 @@ def load():
        -    return {"debug": False}
        +    return {"debug": True}
        diff --git a/README.md b/README.md
        index 2345678..bcdef01 100644
        --- a/README.md
        +++ b/README.md
        @@ -1 +1,2 @@
         # Title
        +100% coverage
    """)


@pytest.fixture
def sample_log_two_commits() -> str:
    """Two commit records from ``git log -p``, one file each."""
    return textwrap.dedent("""\
        commit 0123456789abcdef0123456789abcdef01234567
        Author: Ada Lovelace <ada@example.com>
        Date:   Mon Jan 1 00:00:00 2024 +0000

            Add foo

        diff --git a/foo.py b/foo.py
        new file mode 100644
        index 0000000..e69de29
        --- /dev/null
        +++ b/foo.py
        @@ -0,0 +1 @@
        +x = 1

        commit fedcba9876543210fedcba9876543210fedcba98
        Author: Alan Turing <alan@example.com>
        Date:   Tue Jan 2 00:00:00 2024 +0000

            Change bar

        diff --git a/bar.py b/bar.py
        index 1111111..2222222 100644
        --- a/bar.py
        +++ b/bar.py
        @@ -1 +1 @@
        -y = 1
        +y = 2
    """)


@pytest.fixture
def sample_log_merge_commit() -> str:
    """A merge commit with no patch followed by a regular commit."""
    return textwrap.dedent("""\
        commit aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa
        Merge: 1111111 2222222
        Author: Ada Lovelace <ada@example.com>
        Date:   Wed Jan 3 00:00:00 2024 +0000

            Merge branch 'feature'

        commit bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb
        Author: Ada Lovelace <ada@example.com>
        Date:   Tue Jan 2 00:00:00 2024 +0000

            Touch notes

        diff --git a/notes.txt b/notes.txt
        index 1111111..2222222 100644
        --- a/notes.txt
        +++ b/notes.txt
        @@ -1 +1 @@
        -old
        +new
    """)


def _git(cwd: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=cwd, capture_output=True, check=True)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository with two commits."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    _git(tmp_path, "config", "user.email", "test@test.com")
    _git(tmp_path, "config", "user.name", "Test")
    _git(tmp_path, "config", "commit.gpgsign", "false")

    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-m", "init")

    readme.write_text("# Test\n\nSecond paragraph.\n")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-m", "expand readme")
    return tmp_path


@pytest.fixture
def no_git_dir(tmp_path: Path, monkeypatch) -> Path:
    """A directory that git will not treat as part of any repository."""
    plain = tmp_path / "plain"
    plain.mkdir()
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    return plain
