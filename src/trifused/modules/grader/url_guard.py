"""SSRF guard for user-supplied target URLs."""

import asyncio
import ipaddress
import logging
import socket
from urllib.parse import urlsplit

import httpx

from trifused.errors import UnsafeTargetError

logger = logging.getLogger(__name__)

BLOCKED_HOSTS = frozenset(
    {
        "localhost",
        "127.0.0.1",
        "0.0.0.0",
        "::1",
        "metadata.google.internal",
        "169.254.169.254",
    }
)

_PRIVATE_NETWORKS = tuple(
    ipaddress.ip_network(network)
    for network in (
        "10.0.0.0/8",
        "172.16.0.0/12",
        "192.168.0.0/16",
        "127.0.0.0/8",
        "0.0.0.0/8",
        "169.254.0.0/16",
        "::1/128",
        "::/128",
        "fe80::/10",
        "fc00::/7",
    )
)


def _parse_address(value: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    try:
        return ipaddress.ip_address(value.strip("[]").split("%", 1)[0])
    except ValueError:
        return None


def is_private_address(value: str) -> bool:
    """True for loopback, private, link-local and unspecified addresses."""
    address = _parse_address(value)
    if address is None:
        return False
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped:
        address = address.ipv4_mapped
    return any(address in network for network in _PRIVATE_NETWORKS)


async def resolve_host(hostname: str) -> list[str]:
    """Resolve ``hostname`` to its A/AAAA addresses; empty when resolution fails."""
    loop = asyncio.get_running_loop()
    try:
        infos = await loop.getaddrinfo(hostname, None, type=socket.SOCK_STREAM)
    except (OSError, UnicodeError):
        return []
    return sorted({info[4][0] for info in infos})


async def validate_url(url: str) -> None:
    """Raise :class:`UnsafeTargetError` unless ``url`` is a public http(s) target.

    A hostname that does not resolve is allowed through; the fetch will fail
    on its own.
    """
    try:
        parts = urlsplit(url)
        hostname = (parts.hostname or "").lower()
    except ValueError as exc:
        raise UnsafeTargetError("Invalid URL format") from exc

    if parts.scheme not in ("http", "https"):
        raise UnsafeTargetError("Only HTTP and HTTPS URLs are allowed")
    if not hostname:
        raise UnsafeTargetError("Invalid URL format")
    if hostname in BLOCKED_HOSTS:
        raise UnsafeTargetError("This URL cannot be analyzed")

    if _parse_address(hostname) is not None:
        if is_private_address(hostname):
            raise UnsafeTargetError("Private IP addresses cannot be analyzed")
        return

    for address in await resolve_host(hostname):
        if is_private_address(address):
            logger.warning("SSRF attempt blocked: %s resolves to private address %s", url, address)
            raise UnsafeTargetError("This URL cannot be analyzed")


class ScanRequestGuard:
    """httpx request hook that runs :func:`validate_url` on every outbound request.

    Redirect hops pass through the hook too. Verdicts are cached per scheme
    and host for the life of one scan.
    """

    def __init__(self):
        self._rejections: dict[tuple[str, str], str | None] = {}

    async def __call__(self, request: httpx.Request) -> None:
        key = (request.url.scheme, request.url.host)
        if key not in self._rejections:
            try:
                await validate_url(str(request.url))
            except UnsafeTargetError as exc:
                self._rejections[key] = str(exc)
            else:
                self._rejections[key] = None
        reason = self._rejections[key]
        if reason is not None:
            raise UnsafeTargetError(reason)
