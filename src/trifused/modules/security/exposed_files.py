"""Exposed file prober."""

import asyncio
import logging

from trifused.config import ScanLimits
from trifused.tools.http import FetchSuccess, HTTPClient, HTTPResponse, NetworkError, TimedOut

from .exposed_paths import (
    EXPOSED_FILE_PATHS,
    SOURCE_MAP_DESCRIPTION,
    SOURCE_MAP_PATHS,
    SOURCE_MAP_REMEDIATION,
    SOURCE_MAP_TYPE,
    ExposedPathEntry,
)
from .models import ExposedFileFinding
from .secrets import origin_of

logger = logging.getLogger(__name__)

_HTML_MARKERS = ("<!DOCTYPE", "<html")


def exposed_file_remediation(path: str) -> str:
    return (
        f"Remove or restrict access to {path}. "
        "Configure your web server to block access to sensitive files."
    )


def looks_like_exposed_file(path: str, response: HTTPResponse, limits: ScanLimits) -> bool:
    """Decide whether a probe response is the real file rather than a fallback page.

    Catch-all routers answer 200 with the app shell for any path, so status
    alone proves nothing.
    """
    if response.status_code != 200:
        return False
    content_type = response.content_type.lower()
    length = response.content_length
    if "text/html" in content_type and length > limits.html_fallback_min_length:
        return False
    if length <= 0 or length >= limits.max_exposed_file_bytes:
        return False
    if any(marker in response.body for marker in _HTML_MARKERS) and not path.endswith(".html"):
        return False
    return True


async def _probe_entry(
    client: HTTPClient,
    origin: str,
    entry: ExposedPathEntry,
    limits: ScanLimits,
) -> ExposedFileFinding | None:
    outcome = await client.probe(origin + entry.path, limits.probe_timeout_ms)
    if isinstance(outcome, (TimedOut, NetworkError)):
        return None
    if not looks_like_exposed_file(entry.path, outcome.response, limits):
        return None
    logger.info("Exposed file: %s (%s)", entry.path, entry.severity)
    return ExposedFileFinding(
        path=entry.path,
        type=entry.type,
        severity=entry.severity,
        description=entry.description,
        remediation=exposed_file_remediation(entry.path),
    )


async def find_source_map(
    client: HTTPClient,
    origin: str,
    limits: ScanLimits,
) -> ExposedFileFinding | None:
    """Probe the common bundle map paths one by one; report the first hit only."""
    for map_path in SOURCE_MAP_PATHS:
        outcome = await client.probe(origin + map_path, limits.source_map_timeout_ms)
        if not isinstance(outcome, FetchSuccess) or outcome.response.status_code != 200:
            continue
        content_type = outcome.response.content_type.lower()
        if "json" in content_type or "octet-stream" in content_type:
            logger.info("Exposed source map: %s", map_path)
            return ExposedFileFinding(
                path=map_path,
                type=SOURCE_MAP_TYPE,
                severity="medium",
                description=SOURCE_MAP_DESCRIPTION,
                remediation=SOURCE_MAP_REMEDIATION,
            )
    return None


async def scan_for_exposed_files(
    base_url: str,
    client: HTTPClient,
    limits: ScanLimits | None = None,
) -> list[ExposedFileFinding]:
    """Probe the origin of ``base_url`` for sensitive files and source maps."""
    limits = limits or ScanLimits()
    origin = origin_of(base_url)
    entries = EXPOSED_FILE_PATHS[: limits.max_exposed_paths]

    results = await asyncio.gather(
        *(_probe_entry(client, origin, entry, limits) for entry in entries)
    )
    findings = [finding for finding in results if finding is not None]

    source_map = await find_source_map(client, origin, limits)
    if source_map is not None:
        findings.append(source_map)

    logger.debug("Probed %d paths on %s: %d exposed", len(entries), origin, len(findings))
    return findings
