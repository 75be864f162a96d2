"""Step effects yielded by the search algorithm.

The search and load algorithms are generators that yield these steps and
receive each step's outcome back through send(). They never touch the
filesystem, call a loader, or consult a cache themselves; an executor
(see confseek.adapters.executor) performs every step, either blocking
or awaiting. This keeps ordering, stop conditions and cache semantics
defined once for both engines.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal


if TYPE_CHECKING:
    from pathlib import Path

    from confseek.core.ports import CachePort


@dataclass(frozen=True, slots=True)
class ReadFile:
    """Read a file through the executor's reader.

    Outcome: the file content, or None when it does not exist and
    throw_not_found is False.
    """

    filepath: Path
    throw_not_found: bool = False


@dataclass(frozen=True, slots=True)
class Invoke:
    """Call a loader or transform.

    Outcome: the return value. The asyncio executor awaits it if it is
    awaitable; the synchronous executor rejects awaitables.
    """

    func: Callable[..., Any]
    args: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class Memoize:
    """Run a nested step sequence through a cache.

    Outcome: the cached value for key, or the value returned by the steps
    produced by run(), which is then stored.

    Attributes:
        scope: Which cache this is ("search" or "load"). Executors keep
            in-flight work separate per scope.
        cache: Cache to consult and fill.
        key: Absolute directory or file path.
        run: Factory for the step sequence computing the value.
    """

    scope: Literal["search", "load"]
    cache: CachePort
    key: Path
    run: Callable[[], Steps]


Step = ReadFile | Invoke | Memoize

Steps = Generator[Step, Any, Any]
