"""Executor adapters that perform the steps of a search or load.

Both executors drive the same step generators from confseek.core.search.
SynchronousExecutor blocks on every read and call; AsyncioExecutor awaits
them. Steps are performed strictly one after another in both, so the
first matching search place always wins.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

from confseek.core.cache_wrapper import cache_wrapper, cache_wrapper_sync
from confseek.core.exceptions import ConfigurationError
from confseek.core.steps import Invoke, Memoize, ReadFile


if TYPE_CHECKING:
    import asyncio
    from pathlib import Path

    from confseek.core.ports import AsyncFileReaderPort, FileReaderPort
    from confseek.core.steps import Step, Steps


logger = logging.getLogger(__name__)


class SynchronousExecutor:
    """Executor that performs each step immediately in the current thread.

    Used by ExplorerSync. Loaders and transforms must be plain functions;
    an awaitable return value is a configuration error.

    Args:
        reader: Blocking read primitive.
    """

    def __init__(self, reader: FileReaderPort) -> None:
        self.reader = reader

    def run(self, steps: Steps) -> Any:
        """Drive a step generator to completion and return its value.

        Args:
            steps: Generator yielding steps.

        Returns:
            The generator's return value.
        """
        try:
            step = next(steps)
            while True:
                outcome = self._perform(step)
                step = steps.send(outcome)
        except StopIteration as stop:
            return stop.value
        finally:
            steps.close()

    def _perform(self, step: Step) -> Any:
        if isinstance(step, ReadFile):
            return self.reader.read(step.filepath, throw_not_found=step.throw_not_found)

        if isinstance(step, Invoke):
            value = step.func(*step.args)
            if inspect.isawaitable(value):
                if inspect.iscoroutine(value):
                    value.close()
                raise ConfigurationError(
                    f"{getattr(step.func, '__name__', step.func)!s} returned an "
                    "awaitable; use Explorer instead of ExplorerSync for async "
                    "loaders and transforms"
                )
            return value

        if isinstance(step, Memoize):
            if step.key in step.cache:
                logger.debug("%s cache hit for %s", step.scope, step.key)
            return cache_wrapper_sync(
                step.cache, step.key, lambda: self.run(step.run())
            )

        raise TypeError(f"Unknown step: {step!r}")


class AsyncioExecutor:
    """Executor that awaits each step on the running event loop.

    Used by Explorer. Loaders and transforms may be plain functions or
    return awaitables. Concurrent memoized work for the same cache key is
    shared through an in-flight table owned by this executor.

    Args:
        reader: Non-blocking read primitive.
    """

    def __init__(self, reader: AsyncFileReaderPort) -> None:
        self.reader = reader
        self._in_flight: dict[str, dict[Path, asyncio.Future[Any]]] = {
            "search": {},
            "load": {},
        }

    async def run(self, steps: Steps) -> Any:
        """Drive a step generator to completion and return its value.

        Args:
            steps: Generator yielding steps.

        Returns:
            The generator's return value.
        """
        try:
            step = next(steps)
            while True:
                outcome = await self._perform(step)
                step = steps.send(outcome)
        except StopIteration as stop:
            return stop.value
        finally:
            steps.close()

    async def _perform(self, step: Step) -> Any:
        if isinstance(step, ReadFile):
            return await self.reader.read(
                step.filepath, throw_not_found=step.throw_not_found
            )

        if isinstance(step, Invoke):
            value = step.func(*step.args)
            if inspect.isawaitable(value):
                value = await value
            return value

        if isinstance(step, Memoize):
            if step.key in step.cache:
                logger.debug("%s cache hit for %s", step.scope, step.key)
            return await cache_wrapper(
                step.cache,
                step.key,
                lambda: self.run(step.run()),
                self._in_flight[step.scope],
            )

        raise TypeError(f"Unknown step: {step!r}")
