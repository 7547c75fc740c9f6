"""Per-scan caps and timeouts."""

import logging
from dataclasses import dataclass
from pathlib import Path

from trifused.tools.http import DEFAULT_USER_AGENT

from .getters import get_bool, get_config, get_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanLimits:
    """Bounds on the outbound traffic one scan may generate.

    The count caps keep the scanner from hammering a third-party target and
    may be lowered through configuration but never raised.
    """

    max_external_scripts: int = 10
    script_timeout_ms: int = 3000
    max_script_chars: int = 500_000
    max_exposed_paths: int = 20
    probe_timeout_ms: int = 3000
    source_map_timeout_ms: int = 2000
    max_exposed_file_bytes: int = 1_000_000
    html_fallback_min_length: int = 1000
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True


_DEFAULTS = ScanLimits()


def _capped(key: str, default: int, project_dir: Path | None) -> int:
    value = get_int(key, default, project_dir)
    if value > default:
        logger.warning("%s=%d exceeds the maximum of %d; using %d", key, value, default, default)
        return default
    return value


def get_scan_limits(project_dir: Path | None = None) -> ScanLimits:
    """Build :class:`ScanLimits` from configuration."""
    return ScanLimits(
        max_external_scripts=_capped(
            "TRIFUSED_MAX_EXTERNAL_SCRIPTS", _DEFAULTS.max_external_scripts, project_dir
        ),
        script_timeout_ms=get_int(
            "TRIFUSED_SCRIPT_TIMEOUT_MS", _DEFAULTS.script_timeout_ms, project_dir
        ),
        max_exposed_paths=_capped(
            "TRIFUSED_MAX_EXPOSED_PATHS", _DEFAULTS.max_exposed_paths, project_dir
        ),
        probe_timeout_ms=get_int(
            "TRIFUSED_PROBE_TIMEOUT_MS", _DEFAULTS.probe_timeout_ms, project_dir
        ),
        source_map_timeout_ms=get_int(
            "TRIFUSED_SOURCE_MAP_TIMEOUT_MS", _DEFAULTS.source_map_timeout_ms, project_dir
        ),
        user_agent=str(get_config("TRIFUSED_USER_AGENT", project_dir, _DEFAULTS.user_agent)),
        verify_ssl=get_bool("TRIFUSED_VERIFY_SSL", _DEFAULTS.verify_ssl, project_dir),
    )
