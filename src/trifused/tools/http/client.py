"""Timeout-guarded async HTTP client used by every probe and script fetch."""

import asyncio
import logging
import re
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx

from trifused.errors import UnsafeTargetError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "TriFused Security Scanner/1.0"
DEFAULT_MAX_BODY_BYTES = 1_000_000

_LEADING_DIGITS = re.compile(r"\s*(\d+)")


@dataclass
class HTTPResponse:
    """A completed GET, body capped at the client's ``max_body_bytes``."""

    url: str
    status_code: int
    headers: dict[str, str]
    body: str
    response_time: float
    truncated: bool = False
    content_type: str = ""
    content_length: int = 0

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str, default: str = "") -> str:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower(), default)


@dataclass(frozen=True)
class FetchSuccess:
    """The request completed and produced a response (any status)."""

    response: HTTPResponse


@dataclass(frozen=True)
class TimedOut:
    """The request did not finish before its deadline and was cancelled."""

    url: str
    timeout_ms: int


@dataclass(frozen=True)
class NetworkError:
    """DNS, connection, TLS or protocol failure, or a request the guard refused."""

    url: str
    reason: str


ProbeOutcome = FetchSuccess | TimedOut | NetworkError
RequestGuard = Callable[[httpx.Request], Awaitable[None]]


def parse_content_length(value: str | None) -> int:
    """Parse a Content-Length header leniently; absent or malformed means 0."""
    if not value:
        return 0
    match = _LEADING_DIGITS.match(value)
    return int(match.group(1)) if match else 0


class HTTPClient:
    """Async HTTP client that never raises for network-origin failures.

    One instance wraps one ``httpx.AsyncClient``; open it with ``async with``
    for the duration of a single scan.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        follow_redirects: bool = True,
        verify_ssl: bool = True,
        max_body_bytes: int = DEFAULT_MAX_BODY_BYTES,
        transport: httpx.AsyncBaseTransport | None = None,
        request_guard: RequestGuard | None = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self.follow_redirects = follow_redirects
        self.verify_ssl = verify_ssl
        self.max_body_bytes = max_body_bytes
        self.transport = transport
        self.request_guard = request_guard
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            verify=self.verify_ssl,
            headers={"User-Agent": self.user_agent},
            transport=self.transport,
            event_hooks={"request": [self.request_guard]} if self.request_guard else None,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()
            self.client = None

    async def probe(self, url: str, timeout_ms: int) -> ProbeOutcome:
        """GET ``url`` with a hard deadline covering headers and body.

        Only network-origin failures are folded into the outcome; anything
        else is a bug and propagates.
        """
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        seconds = timeout_ms / 1000
        try:
            async with asyncio.timeout(seconds):
                response = await self._get(url, seconds)
        except TimeoutError:
            logger.debug("Timed out after %dms: %s", timeout_ms, url)
            return TimedOut(url=url, timeout_ms=timeout_ms)
        except httpx.TimeoutException:
            logger.debug("Timed out after %dms: %s", timeout_ms, url)
            return TimedOut(url=url, timeout_ms=timeout_ms)
        except UnsafeTargetError as exc:
            logger.warning("Blocked request to %s: %s", url, exc)
            return NetworkError(url=url, reason=str(exc))
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
            reason = str(exc) or type(exc).__name__
            logger.debug("Request failed for %s: %s", url, reason)
            return NetworkError(url=url, reason=reason)
        return FetchSuccess(response=response)

    async def fetch(self, url: str, timeout_ms: int) -> HTTPResponse | None:
        """Like :meth:`probe`, but collapses every failure to ``None``."""
        outcome = await self.probe(url, timeout_ms)
        if isinstance(outcome, FetchSuccess):
            return outcome.response
        return None

    async def _get(self, url: str, seconds: float) -> HTTPResponse:
        start = time.perf_counter()
        async with self.client.stream("GET", url, timeout=seconds) as response:
            buffer = bytearray()
            truncated = False
            async for chunk in response.aiter_bytes():
                if len(buffer) + len(chunk) > self.max_body_bytes:
                    buffer.extend(chunk[: self.max_body_bytes - len(buffer)])
                    truncated = True
                    break
                buffer.extend(chunk)
            body = bytes(buffer).decode(response.encoding or "utf-8", errors="replace")

        headers = dict(response.headers)
        return HTTPResponse(
            url=str(response.url),
            status_code=response.status_code,
            headers=headers,
            body=body,
            response_time=time.perf_counter() - start,
            truncated=truncated,
            content_type=headers.get("content-type", ""),
            content_length=parse_content_length(headers.get("content-length")),
        )


async def fetch_with_timeout(
    url: str,
    timeout_ms: int = 5000,
    client: HTTPClient | None = None,
) -> HTTPResponse | None:
    """Fetch ``url``; return ``None`` on timeout or any network failure."""
    if client is not None:
        return await client.fetch(url, timeout_ms)
    async with HTTPClient() as own_client:
        return await own_client.fetch(url, timeout_ms)
