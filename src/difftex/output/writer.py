"""Write a finished document to disk."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class OutputError(Exception):
    """Raised when the output file cannot be created or written."""


def write_document(path: Union[str, Path], content: str) -> Path:
    """Write *content* to *path*, creating parent directories as needed.

    Returns the resolved output path.
    """
    target = Path(path).expanduser()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Cannot write {target}: {exc}") from exc
    return target.resolve()
