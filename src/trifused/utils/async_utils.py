"""Running async scans from synchronous entry points."""

import asyncio
from collections.abc import Coroutine
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

T = TypeVar("T")


def safe_async_run(coro: Coroutine[Any, Any, T]) -> T:
    """Drive ``coro`` to completion from synchronous code and return its result.

    Typer commands call this. When the caller already sits inside a running
    event loop (an embedding host, or an async test), the coroutine gets a
    fresh loop on a worker thread instead.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="trifused-run") as pool:
        return pool.submit(asyncio.run, coro).result()
