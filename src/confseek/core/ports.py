"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable


if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class FileReaderPort(Protocol):
    """Blocking read primitive used by ExplorerSync."""

    def read(self, filepath: Path, *, throw_not_found: bool = False) -> str | None:
        """Read a text file.

        Args:
            filepath: Absolute path of the file.
            throw_not_found: If True, a missing file is a hard failure.

        Returns:
            File content, or None if the file does not exist and
            throw_not_found is False.

        Raises:
            ConfigFileNotFoundError: If the file is missing and
                throw_not_found is True.
            ConfigReadError: For any other I/O failure.
        """
        ...


@runtime_checkable
class AsyncFileReaderPort(Protocol):
    """Non-blocking read primitive used by Explorer."""

    async def read(
        self, filepath: Path, *, throw_not_found: bool = False
    ) -> str | None:
        """Read a text file without blocking the event loop.

        Same contract as FileReaderPort.read().
        """
        ...


@runtime_checkable
class CachePort(Protocol):
    """In-memory result cache keyed by absolute path.

    Values are stored as produced, including NotFound results and None
    returned by a transform, so membership must be checked with `in`
    rather than by comparing get() against None.
    """

    def __contains__(self, key: object) -> bool:
        """Whether a result is stored for key."""
        ...

    def get(self, key: Path) -> Any:
        """Get the stored result for key, or None if not cached."""
        ...

    def put(self, key: Path, value: Any) -> None:
        """Store a result for key."""
        ...

    def invalidate(self, key: Path) -> None:
        """Remove a single entry."""
        ...

    def clear(self) -> None:
        """Remove all entries."""
        ...

    def list_all_keys(self) -> list[Path]:
        """List all cache keys.

        Returns:
            List of all keys currently in the cache, in insertion order.
        """
        ...
