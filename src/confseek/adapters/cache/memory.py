"""In-memory cache adapter implementing CachePort."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from pathlib import Path


class MemoryCache:
    """Result cache held in a dict for the lifetime of an explorer.

    Keys are absolute directory paths (search cache) or absolute file
    paths (load cache). Entries are never mutated after insertion and only
    go away through invalidate() or clear().

    Args:
        entries: Optional initial entries, e.g. to pre-seed a cache in tests.
    """

    def __init__(self, entries: dict[Path, Any] | None = None) -> None:
        self._entries: dict[Path, Any] = dict(entries) if entries else {}

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: Path) -> Any:
        """Get the stored result for key, or None if not cached.

        Args:
            key: Absolute path.

        Returns:
            The stored result. Use `key in cache` to tell a stored None
            apart from a miss.
        """
        return self._entries.get(key)

    def put(self, key: Path, value: Any) -> None:
        """Store a result for key.

        Args:
            key: Absolute path.
            value: The result to store.
        """
        self._entries[key] = value

    def invalidate(self, key: Path) -> None:
        """Remove one entry if present.

        Args:
            key: Absolute path to forget.
        """
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def list_all_keys(self) -> list[Path]:
        """List all cache keys in insertion order."""
        return list(self._entries)
