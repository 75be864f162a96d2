"""Unit tests for the sync and async cache wrappers."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from confseek.adapters.cache import MemoryCache
from confseek.core.cache_wrapper import cache_wrapper, cache_wrapper_sync
from confseek.core.models import NOT_FOUND


KEY = Path("/repo")


@pytest.mark.cache
class TestCacheWrapperSync:
    """Tests for cache_wrapper_sync()."""

    def test_miss_computes_and_stores(self) -> None:
        """A miss runs fn and stores its value."""
        cache = MemoryCache()

        result = cache_wrapper_sync(cache, KEY, lambda: "value")

        assert result == "value"
        assert cache.get(KEY) == "value"

    def test_hit_skips_computation(self) -> None:
        """A hit returns the stored value without calling fn."""
        cache = MemoryCache({KEY: "cached"})

        def fail() -> str:
            raise AssertionError("should not be called")

        assert cache_wrapper_sync(cache, KEY, fail) == "cached"

    def test_not_found_is_a_hit(self) -> None:
        """Stored NotFound results count as hits."""
        cache = MemoryCache({KEY: NOT_FOUND})
        calls: list[int] = []

        result = cache_wrapper_sync(cache, KEY, lambda: calls.append(1))

        assert result is NOT_FOUND
        assert calls == []

    def test_exception_not_cached(self) -> None:
        """A failing fn leaves no entry behind."""
        cache = MemoryCache()

        def fail() -> str:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            cache_wrapper_sync(cache, KEY, fail)

        assert KEY not in cache


@pytest.mark.cache
class TestCacheWrapperAsync:
    """Tests for cache_wrapper()."""

    @pytest.mark.asyncio
    async def test_miss_computes_and_stores(self) -> None:
        """A miss awaits fn and stores its value."""
        cache = MemoryCache()
        in_flight: dict = {}

        async def compute() -> str:
            return "value"

        result = await cache_wrapper(cache, KEY, compute, in_flight)

        assert result == "value"
        assert cache.get(KEY) == "value"
        assert in_flight == {}

    @pytest.mark.asyncio
    async def test_hit_skips_computation(self) -> None:
        """A hit returns the stored value without awaiting fn."""
        cache = MemoryCache({KEY: "cached"})

        async def fail() -> str:
            raise AssertionError("should not be called")

        assert await cache_wrapper(cache, KEY, fail, {}) == "cached"

    @pytest.mark.asyncio
    async def test_concurrent_callers_share_work(self) -> None:
        """Callers arriving during computation await the same result."""
        cache = MemoryCache()
        in_flight: dict = {}
        release = asyncio.Event()
        calls: list[int] = []

        async def compute() -> object:
            calls.append(1)
            await release.wait()
            return object()

        tasks = [
            asyncio.create_task(cache_wrapper(cache, KEY, compute, in_flight))
            for _ in range(3)
        ]
        await asyncio.sleep(0)
        assert KEY in in_flight
        release.set()
        results = await asyncio.gather(*tasks)

        assert calls == [1]
        assert results[0] is results[1] is results[2]
        assert in_flight == {}

    @pytest.mark.asyncio
    async def test_failure_shared_and_not_cached(self) -> None:
        """Waiters receive the owner's exception; nothing is stored."""
        cache = MemoryCache()
        in_flight: dict = {}
        release = asyncio.Event()

        async def compute() -> str:
            await release.wait()
            raise RuntimeError("boom")

        tasks = [
            asyncio.create_task(cache_wrapper(cache, KEY, compute, in_flight))
            for _ in range(2)
        ]
        await asyncio.sleep(0)
        release.set()
        outcomes = await asyncio.gather(*tasks, return_exceptions=True)

        assert [type(o) for o in outcomes] == [RuntimeError, RuntimeError]
        assert KEY not in cache
        assert in_flight == {}

    @pytest.mark.asyncio
    async def test_retry_after_failure(self) -> None:
        """The next call after a failure computes again."""
        cache = MemoryCache()
        attempts: list[int] = []

        async def flaky() -> str:
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("first try")
            return "second try"

        with pytest.raises(RuntimeError):
            await cache_wrapper(cache, KEY, flaky, {})
        result = await cache_wrapper(cache, KEY, flaky, {})

        assert result == "second try"
        assert len(attempts) == 2

    @pytest.mark.asyncio
    async def test_keys_are_independent(self) -> None:
        """Different keys never share in-flight work."""
        cache = MemoryCache()
        in_flight: dict = {}

        async def compute_a() -> str:
            await asyncio.sleep(0)
            return "a"

        async def compute_b() -> str:
            await asyncio.sleep(0)
            return "b"

        a, b = await asyncio.gather(
            cache_wrapper(cache, Path("/a"), compute_a, in_flight),
            cache_wrapper(cache, Path("/b"), compute_b, in_flight),
        )

        assert (a, b) == ("a", "b")
