"""Secret scanner: inline scripts, same-site bundles and raw HTML."""

import asyncio
import logging
import re
from collections.abc import Iterable
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

from trifused.config import ScanLimits
from trifused.tools.http import HTTPClient

from .models import SECRET_LOCATION, SecretFinding
from .patterns import FALSE_POSITIVE_MARKERS, MIN_SECRET_LENGTH, SECRET_PATTERNS, SecretPattern

logger = logging.getLogger(__name__)

# Third-party CDN and analytics hosts; their bundles are not the site's code.
SKIPPED_SCRIPT_HOST_MARKERS: tuple[str, ...] = (
    "googletagmanager",
    "google-analytics",
    "cdn.",
    "unpkg.com",
    "cdnjs.",
    "jsdelivr.",
)

_ALPHA_ONLY = re.compile(r"[a-z]+", re.IGNORECASE | re.ASCII)
_DIGITS_ONLY = re.compile(r"[0-9]+")
_DEFAULT_PORTS = {"http": 80, "https": 443}


def mask_secret(value: str) -> str:
    """Irreversibly redact a matched secret for display."""
    if len(value) <= 12:
        return "[REDACTED]"
    return f"{value[:4]}***{value[-2:]} ({len(value)} chars)"


def origin_of(url: str) -> str:
    """Return scheme://host[:port] for ``url``; credentials and default ports are dropped."""
    parts = urlsplit(url)
    host = parts.hostname
    if not parts.scheme or not host:
        raise ValueError(f"Not an absolute URL: {url!r}")
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is None or port == _DEFAULT_PORTS.get(parts.scheme):
        return f"{parts.scheme}://{host}"
    return f"{parts.scheme}://{host}:{port}"


def is_probable_false_positive(match: str) -> bool:
    """Filter matches that are too short, single-class or sample data."""
    if len(match) < MIN_SECRET_LENGTH:
        return True
    if _ALPHA_ONLY.fullmatch(match) or _DIGITS_ONLY.fullmatch(match):
        return True
    lowered = match.lower()
    return any(marker in lowered for marker in FALSE_POSITIVE_MARKERS)


def extract_scripts(html: str) -> tuple[list[str], list[str]]:
    """Return (inline script bodies, external script sources) in document order."""
    soup = BeautifulSoup(html, "html.parser")
    inline: list[str] = []
    sources: list[str] = []
    for script in soup.find_all("script"):
        src = script.get("src")
        if src is not None:
            if src.strip():
                sources.append(src.strip())
            continue
        content = script.get_text()
        if content.strip():
            inline.append(content)
    return inline, sources


def resolve_script_urls(sources: Iterable[str], page_url: str, limit: int) -> list[str]:
    """Resolve the first ``limit`` script sources, dropping CDN and analytics hosts.

    Skipped sources still count against ``limit``.
    """
    origin = origin_of(page_url)
    urls: list[str] = []
    for src in list(sources)[:limit]:
        script_url = src if src.startswith("http") else urljoin(origin, src)
        if any(marker in script_url for marker in SKIPPED_SCRIPT_HOST_MARKERS):
            logger.debug("Skipping third-party script %s", script_url)
            continue
        urls.append(script_url)
    return urls


async def _fetch_script(client: HTTPClient, url: str, limits: ScanLimits) -> str | None:
    response = await client.fetch(url, limits.script_timeout_ms)
    if response is None or not response.ok:
        return None
    if response.truncated or len(response.body) >= limits.max_script_chars:
        logger.debug("Skipping oversized script %s", url)
        return None
    return response.body


def find_secrets(
    corpus: str,
    patterns: Iterable[SecretPattern] = SECRET_PATTERNS,
) -> list[SecretFinding]:
    """Apply the catalog to ``corpus`` and return masked, deduplicated findings."""
    findings: list[SecretFinding] = []
    seen: set[str] = set()
    for secret_pattern in patterns:
        for match in secret_pattern.pattern.finditer(corpus):
            value = match.group(0)
            # Recorded before filtering: a rejected value stays rejected.
            if value in seen:
                continue
            seen.add(value)
            if is_probable_false_positive(value):
                continue
            findings.append(
                SecretFinding(
                    type=secret_pattern.name,
                    pattern=secret_pattern.describe(),
                    value=mask_secret(value),
                    location=SECRET_LOCATION,
                    severity=secret_pattern.severity,
                    remediation=secret_pattern.remediation,
                )
            )
    return findings


async def scan_for_secrets(
    url: str,
    html: str,
    client: HTTPClient,
    limits: ScanLimits | None = None,
) -> list[SecretFinding]:
    """Scan the page HTML and its first-party script bundles for leaked credentials."""
    limits = limits or ScanLimits()
    inline, sources = extract_scripts(html)
    script_urls = resolve_script_urls(sources, url, limits.max_external_scripts)

    bundles = await asyncio.gather(
        *(_fetch_script(client, script_url, limits) for script_url in script_urls)
    )
    scripts = inline + [bundle for bundle in bundles if bundle is not None]
    logger.debug(
        "Secret scan corpus: %d inline, %d of %d bundles fetched",
        len(inline),
        len(scripts) - len(inline),
        len(script_urls),
    )

    corpus = "\n".join(scripts) + "\n" + html
    # CPU-bound; runs off the event loop
    findings = await asyncio.to_thread(find_secrets, corpus)
    for finding in findings:
        logger.info("Secret detected: %s %s", finding.type, finding.value)
    return findings
