"""Memoization of search and load work keyed by absolute path.

Results are stored as returned, NotFound included. Exceptions are never
stored, so a failed computation is retried on the next call.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping
    from pathlib import Path

    from confseek.core.ports import CachePort


def cache_wrapper_sync(cache: CachePort, key: Path, fn: Callable[[], Any]) -> Any:
    """Return the cached value for key, computing and storing it on a miss."""
    if key in cache:
        return cache.get(key)

    result = fn()
    cache.put(key, result)
    return result


async def cache_wrapper(
    cache: CachePort,
    key: Path,
    fn: Callable[[], Awaitable[Any]],
    in_flight: MutableMapping[Path, asyncio.Future[Any]],
) -> Any:
    """Async variant of cache_wrapper_sync that shares in-flight work.

    The value is computed in a task of its own. Every caller, including
    the one that started it, awaits that task through a shield, so a
    cancelled caller leaves the work running for the others.

    Args:
        cache: Cache to consult and fill.
        key: Cache key.
        fn: Coroutine factory computing the value.
        in_flight: Pending tasks by key, owned by the caller.
    """
    if key in cache:
        return cache.get(key)

    task = in_flight.get(key)
    if task is None:
        task = asyncio.ensure_future(_compute(cache, key, fn, in_flight))
        in_flight[key] = task
    return await asyncio.shield(task)


async def _compute(
    cache: CachePort,
    key: Path,
    fn: Callable[[], Awaitable[Any]],
    in_flight: MutableMapping[Path, asyncio.Future[Any]],
) -> Any:
    try:
        result = await fn()
        cache.put(key, result)
        return result
    finally:
        in_flight.pop(key, None)
