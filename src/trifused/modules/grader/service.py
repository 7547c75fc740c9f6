"""Security portion of a website grade."""

import logging
from dataclasses import dataclass

import httpx

from trifused.config import ScanLimits
from trifused.modules.security import SecurityScanResult, run_security_scan
from trifused.tools.http import HeaderPostureResult, check_header_posture

from .page import fetch_page
from .url_guard import ScanRequestGuard, validate_url

logger = logging.getLogger(__name__)


@dataclass
class SiteSecurityReport:
    """Security scan and header posture for one graded site."""

    url: str
    final_url: str
    status_code: int
    security: SecurityScanResult
    header_posture: HeaderPostureResult

    def to_dict(self) -> dict[str, object]:
        return {
            "url": self.url,
            "finalUrl": self.final_url,
            "statusCode": self.status_code,
            "security": self.security.to_dict(),
            "headerPosture": self.header_posture.to_dict(),
        }


async def grade_site(
    url: str,
    limits: ScanLimits | None = None,
    check_url: bool = True,
    page_timeout_ms: int = 15000,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SiteSecurityReport:
    """Validate, fetch and scan ``url``.

    With ``check_url`` on, every request the scan makes is held to the same
    guard as the page itself.
    """
    if check_url:
        await validate_url(url)

    page = await fetch_page(
        url,
        timeout_ms=page_timeout_ms,
        check_redirects=check_url,
        transport=transport,
    )
    logger.debug("Fetched %s -> %s (HTTP %d)", url, page.final_url, page.status_code)

    security = await run_security_scan(
        page.final_url,
        page.html,
        limits,
        transport,
        request_guard=ScanRequestGuard() if check_url else None,
    )
    return SiteSecurityReport(
        url=url,
        final_url=page.final_url,
        status_code=page.status_code,
        security=security,
        header_posture=check_header_posture(page.final_url, page.headers),
    )
