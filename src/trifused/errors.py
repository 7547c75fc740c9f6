"""Exception types raised by TriFused."""


class TriFusedError(Exception):
    """Base class for errors the CLI reports without a traceback."""


class ConfigError(TriFusedError):
    """A configuration value could not be used."""


class UnsafeTargetError(TriFusedError):
    """The target URL points somewhere the grader must not reach."""


class PageFetchError(TriFusedError):
    """The primary page could not be retrieved."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Could not fetch {url}: {reason}")
        self.url = url
        self.reason = reason
