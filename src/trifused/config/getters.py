"""Typed getters over the layered TriFused settings."""

import os
from pathlib import Path
from typing import Any

from trifused.errors import ConfigError

from .env_loader import load_global_config, load_project_config

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """Look ``key`` up in the environment, then ``.trifused.env``, then the global YAML.

    Empty environment values count as unset. Files are re-read on every call
    so a scan always sees the current settings.
    """
    from_env = os.environ.get(key)
    if from_env:
        return from_env

    for source in (load_project_config(project_dir), load_global_config()):
        if key in source:
            return source[key]
    return default


def get_int(key: str, default: int, project_dir: Path | None = None) -> int:
    """Get a strictly positive integer setting."""
    raw = get_config(key, project_dir, default)
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {value}")
    return value


def get_bool(key: str, default: bool, project_dir: Path | None = None) -> bool:
    """Get a boolean setting (true/false, yes/no, 1/0, on/off)."""
    raw = get_config(key, project_dir, default)
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be a boolean, got {raw!r}")


def get_page_timeout_ms(project_dir: Path | None = None) -> int:
    """Timeout for fetching the primary page (default: 15000ms)."""
    return get_int("TRIFUSED_PAGE_TIMEOUT_MS", 15000, project_dir)


def allow_private_targets(project_dir: Path | None = None) -> bool:
    """Whether the URL guard is disabled for lab targets (default: false)."""
    return get_bool("TRIFUSED_ALLOW_PRIVATE_TARGETS", False, project_dir)
