"""Test configuration and fixtures for TriFused."""

import logging
import os
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import httpx
import pytest

from trifused.config import ScanLimits


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(temp_dir: Path, monkeypatch) -> Path:
    """Keep tests away from the real ~/.trifused and any TRIFUSED_* variables."""
    home = temp_dir / "home"
    work = temp_dir / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("TRIFUSED_"):
            monkeypatch.delenv(key, raising=False)
    return work


@pytest.fixture
def fast_limits() -> ScanLimits:
    """Default caps with short timeouts for timing tests."""
    return ScanLimits(probe_timeout_ms=300, script_timeout_ms=300, source_map_timeout_ms=300)


@pytest.fixture
def not_found_transport() -> Callable[..., httpx.MockTransport]:
    """Factory for a transport answering 404 to everything, recording request paths."""

    def factory(recorded: list[str] | None = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if recorded is not None:
                recorded.append(request.url.path)
            return httpx.Response(404, text="Not Found")

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def spa_html() -> str:
    """A catch-all single page app shell of about 5000 bytes."""
    shell = '<!DOCTYPE html><html><head><title>App</title></head><body><div id="root"></div>'
    padding = "<!-- " + "p" * 4900 + " -->"
    return shell + padding + "</body></html>"


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo CLI logging setup so caplog sees ``trifused`` records."""
    yield
    logger = logging.getLogger("trifused")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
