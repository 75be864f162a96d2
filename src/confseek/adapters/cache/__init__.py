"""Cache adapters."""

from confseek.adapters.cache.memory import MemoryCache


__all__ = ["MemoryCache"]
