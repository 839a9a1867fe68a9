"""Git subprocess wrapper — repo root, diff, and log-with-patches capture."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

DEFAULT_TIMEOUT = 60


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: list[str], cwd: Path, timeout: int = DEFAULT_TIMEOUT) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except NotADirectoryError:
        raise GitError(f"not a directory: {cwd}")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        # git diff --exit-code style non-zero without a fatal message is fine
        if not stderr or "fatal" not in stderr.lower():
            return result.stdout
        raise GitError(f"git error: {stderr}")
    return result.stdout


def _check_ref(ref: str) -> str:
    """Reject references git would parse as an option."""
    if not ref or ref.startswith("-"):
        raise GitError(f"invalid reference: {ref!r}")
    return ref


def get_repo_root(cwd: Optional[Path] = None, timeout: int = DEFAULT_TIMEOUT) -> Path:
    """Return the root of the git repository containing *cwd*."""
    cwd = cwd or Path.cwd()
    if not cwd.is_dir():
        raise GitError(f"not a directory: {cwd}")
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd, timeout=timeout)
    return Path(out.strip())


def get_diff(
    repo_root: Path,
    ref: str = "HEAD",
    unified: int = 3,
    timeout: int = DEFAULT_TIMEOUT,
) -> str:
    """Return the unified diff of the working tree against *ref*."""
    return _run_git(
        ["diff", _check_ref(ref), "--patch", f"--unified={unified}", "--no-color"],
        cwd=repo_root,
        timeout=timeout,
    )


def get_log(
    repo_root: Path,
    ref: str = "HEAD",
    unified: int = 3,
    max_count: Optional[int] = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> str:
    """Return ``git log -p`` output for the history reachable from *ref*."""
    args = ["log", "-p", f"--unified={unified}", "--no-color"]
    if max_count:
        args.append(f"--max-count={max_count}")
    args.append(_check_ref(ref))
    return _run_git(args, cwd=repo_root, timeout=timeout)
