"""
TriFused settings.

A key is looked up in this order, first hit wins:

- the process environment (empty values are ignored)
- `.trifused.env` in the working directory
- `~/.trifused/config.yml`
- the built-in default
"""

from .env_loader import (
    get_global_config_path,
    get_project_env_path,
    load_env_file,
    load_global_config,
    load_project_config,
)
from .getters import (
    allow_private_targets,
    get_bool,
    get_config,
    get_int,
    get_page_timeout_ms,
)
from .limits import ScanLimits, get_scan_limits

__all__ = [
    # env_loader
    "get_global_config_path",
    "get_project_env_path",
    "load_env_file",
    "load_global_config",
    "load_project_config",
    # getters
    "allow_private_targets",
    "get_bool",
    "get_config",
    "get_int",
    "get_page_timeout_ms",
    # limits
    "ScanLimits",
    "get_scan_limits",
]
