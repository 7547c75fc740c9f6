"""Reading the ``.trifused.env`` and ``~/.trifused/config.yml`` settings files."""

from pathlib import Path
from typing import Any

import yaml

PROJECT_ENV_FILENAME = ".trifused.env"
_QUOTES = "\"'"


def get_global_config_path() -> Path:
    """Return the path of the global ~/.trifused/config.yml file."""
    return Path.home() / ".trifused" / "config.yml"


def get_project_env_path(project_dir: Path | None = None) -> Path:
    """Return the project .env path for ``project_dir`` (default: cwd)."""
    return (project_dir or Path.cwd()) / PROJECT_ENV_FILENAME


def load_env_file(env_path: Path) -> dict[str, str]:
    """Parse ``KEY=value`` lines; blank lines and ``#`` comments are skipped."""
    if not env_path.is_file():
        return {}
    settings: dict[str, str] = {}
    for raw in env_path.read_text(encoding="utf-8").splitlines():
        entry = raw.strip()
        if not entry or entry.startswith("#"):
            continue
        key, sep, value = entry.partition("=")
        if sep:
            settings[key.strip()] = value.strip().strip(_QUOTES)
    return settings


def load_global_config() -> dict[str, Any]:
    """Load the global YAML settings; anything but a mapping reads as empty."""
    path = get_global_config_path()
    if not path.is_file():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return data if isinstance(data, dict) else {}


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Load project-specific configuration from the .trifused.env file."""
    return load_env_file(get_project_env_path(project_dir))
