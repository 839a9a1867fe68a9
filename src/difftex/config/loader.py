"""Load and merge configuration from .difftex.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from difftex.config.defaults import CONFIG_FILENAME
from difftex.config.schema import DiffTexConfig, DocumentConfig, GitConfig, OutputConfig


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _env_int(name: str) -> Optional[int]:
    val = os.environ.get(name)
    if not val:
        return None
    try:
        return int(val)
    except ValueError:
        return None


def _merge_env_overrides(cfg: DiffTexConfig) -> None:
    """Apply DIFFTEX_* environment variable overrides."""
    if val := os.environ.get("DIFFTEX_REF"):
        cfg.git.ref = val
    if val := os.environ.get("DIFFTEX_OUTPUT"):
        cfg.output.path = val
    if val := os.environ.get("DIFFTEX_TITLE"):
        cfg.document.title = val
    if (num := _env_int("DIFFTEX_UNIFIED")) is not None:
        cfg.git.unified = num
    if (num := _env_int("DIFFTEX_MAX_COUNT")) is not None:
        cfg.git.max_count = num


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    table = data.get(section, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in table.items() if k in valid_fields}
    return cls(**filtered)


def validate(cfg: DiffTexConfig) -> None:
    """Raise ConfigError for values the renderer cannot use."""
    for name, value, minimum in (
        ("git.unified", cfg.git.unified, 0),
        ("git.max_count", cfg.git.max_count, 0),
        ("git.timeout", cfg.git.timeout, 1),
        ("document.commit_id_width", cfg.document.commit_id_width, 1),
    ):
        if not isinstance(value, int) or isinstance(value, bool) or value < minimum:
            raise ConfigError(f"{name} must be an integer >= {minimum}, got {value!r}")
    for name, value in (
        ("git.ref", cfg.git.ref),
        ("output.path", cfg.output.path),
        ("document.title", cfg.document.title),
        ("document.author", cfg.document.author),
    ):
        if not isinstance(value, str):
            raise ConfigError(f"{name} must be a string, got {value!r}")
    if not cfg.git.ref or cfg.git.ref.startswith("-"):
        raise ConfigError(f"git.ref must be a revision name, got {cfg.git.ref!r}")


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> DiffTexConfig:
    """Load, validate, and return a DiffTexConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = DiffTexConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = DiffTexConfig(
            git=_build_section(raw, GitConfig, "git"),
            output=_build_section(raw, OutputConfig, "output"),
            document=_build_section(raw, DocumentConfig, "document"),
        )

    _merge_env_overrides(cfg)
    validate(cfg)
    return cfg
