"""Configuration loading, schema, and defaults."""

from difftex.config.loader import ConfigError, load_config
from difftex.config.schema import DiffTexConfig

__all__ = [
    "ConfigError",
    "DiffTexConfig",
    "load_config",
]
