"""Primary page retrieval with guarded redirect handling."""

import asyncio
from dataclasses import dataclass, field
from urllib.parse import urljoin

import httpx

from trifused.errors import PageFetchError
from trifused.tools.http import HTTPClient, HTTPResponse, NetworkError, TimedOut

from .url_guard import validate_url

GRADER_USER_AGENT = "TriFused Website Grader Bot/1.0"
MAX_REDIRECTS = 5
MAX_PAGE_BYTES = 5_000_000


@dataclass
class PageSnapshot:
    """The page the grader scans."""

    url: str
    final_url: str
    status_code: int
    html: str
    headers: dict[str, str] = field(default_factory=dict)


async def _get(client: HTTPClient, url: str, timeout_ms: int) -> HTTPResponse:
    outcome = await client.probe(url, timeout_ms)
    if isinstance(outcome, TimedOut):
        raise PageFetchError(url, f"timed out after {timeout_ms}ms")
    if isinstance(outcome, NetworkError):
        raise PageFetchError(url, outcome.reason)
    return outcome.response


async def fetch_page(
    url: str,
    timeout_ms: int = 15000,
    check_redirects: bool = True,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PageSnapshot:
    """Fetch ``url``, following up to five redirects.

    Each redirect target passes the URL guard before it is requested. The
    deadline covers the whole redirect chain.
    """
    async with HTTPClient(
        timeout=timeout_ms / 1000,
        user_agent=GRADER_USER_AGENT,
        follow_redirects=False,
        max_body_bytes=MAX_PAGE_BYTES,
        transport=transport,
    ) as client:
        final_url = url
        try:
            async with asyncio.timeout(timeout_ms / 1000):
                response = await _get(client, final_url, timeout_ms)
                redirects = 0
                while 300 <= response.status_code < 400 and redirects < MAX_REDIRECTS:
                    location = response.header("location")
                    if not location:
                        break
                    final_url = urljoin(final_url, location)
                    if check_redirects:
                        await validate_url(final_url)
                    response = await _get(client, final_url, timeout_ms)
                    redirects += 1
        except TimeoutError as exc:
            raise PageFetchError(url, f"timed out after {timeout_ms}ms") from exc

    return PageSnapshot(
        url=url,
        final_url=final_url,
        status_code=response.status_code,
        html=response.body,
        headers=response.headers,
    )
