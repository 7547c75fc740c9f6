"""HTTP helpers for TriFused."""

from .client import (
    DEFAULT_USER_AGENT,
    FetchSuccess,
    HTTPClient,
    HTTPResponse,
    NetworkError,
    ProbeOutcome,
    RequestGuard,
    TimedOut,
    fetch_with_timeout,
)
from .headers import HeaderFinding, HeaderPostureResult, check_header_posture

__all__ = [
    "DEFAULT_USER_AGENT",
    "FetchSuccess",
    "HTTPClient",
    "HTTPResponse",
    "HeaderFinding",
    "HeaderPostureResult",
    "NetworkError",
    "ProbeOutcome",
    "RequestGuard",
    "TimedOut",
    "check_header_posture",
    "fetch_with_timeout",
]
