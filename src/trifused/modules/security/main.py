"""Security scan orchestration."""

import asyncio
import logging
import time

import httpx

from trifused.config import ScanLimits
from trifused.tools.http import HTTPClient, RequestGuard

from .exposed_files import scan_for_exposed_files
from .models import SecurityScanResult
from .scoring import calculate_security_score
from .secrets import scan_for_secrets

logger = logging.getLogger(__name__)


class SecurityScanner:
    """Runs the secret scan and the exposed file probe against one site.

    Holds configuration only; every :meth:`scan` call opens its own HTTP
    client and builds fresh finding lists, so one instance can serve
    concurrent scans of different URLs.
    """

    def __init__(
        self,
        limits: ScanLimits | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.limits = limits or ScanLimits()
        self.transport = transport

    def _client(self, request_guard: RequestGuard | None) -> HTTPClient:
        return HTTPClient(
            timeout=max(self.limits.probe_timeout_ms, self.limits.script_timeout_ms) / 1000,
            user_agent=self.limits.user_agent,
            verify_ssl=self.limits.verify_ssl,
            max_body_bytes=self.limits.max_exposed_file_bytes,
            transport=self.transport,
            request_guard=request_guard,
        )

    async def scan(
        self,
        url: str,
        html: str,
        request_guard: RequestGuard | None = None,
    ) -> SecurityScanResult:
        """Scan ``url`` whose already-fetched body is ``html``.

        ``request_guard`` runs before every outbound request, redirect hops
        included; a request it rejects counts as a network failure.

        Sub-scanner failures other than per-request network errors propagate.
        """
        started = time.perf_counter()
        logger.debug("Starting security scan of %s", url)

        async with self._client(request_guard) as client:
            secrets_found, exposed_files = await asyncio.gather(
                scan_for_secrets(url, html, client, self.limits),
                scan_for_exposed_files(url, client, self.limits),
            )

        result = SecurityScanResult(
            secrets_found=secrets_found,
            exposed_files=exposed_files,
            security_score=calculate_security_score(secrets_found, exposed_files),
            scan_duration=round((time.perf_counter() - started) * 1000),
        )
        logger.debug(
            "Security scan of %s complete: score=%d findings=%d in %dms",
            url,
            result.security_score,
            result.findings_count,
            result.scan_duration,
        )
        return result


async def run_security_scan(
    url: str,
    html: str,
    limits: ScanLimits | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    request_guard: RequestGuard | None = None,
) -> SecurityScanResult:
    """Scan a page for leaked secrets and exposed files and score the result."""
    return await SecurityScanner(limits, transport).scan(url, html, request_guard)
