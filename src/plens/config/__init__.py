"""Configuration helpers for plens."""
from __future__ import annotations

from .settings import (
    AppConfig,
    LoggingConfig,
    SourcesConfig,
    load_config,
    resolve_config_path,
    save_config,
)

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "SourcesConfig",
    "load_config",
    "resolve_config_path",
    "save_config",
]
