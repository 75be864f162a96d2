"""Core domain module for confseek.

This module contains the result models, port definitions and the search
algorithm. Apart from the engines in services, it has no I/O dependencies
and can be tested in isolation.
"""

from confseek.core.models import (
    NOT_FOUND,
    Empty,
    ExplorerOptions,
    Found,
    NotFound,
    SearchResult,
)
from confseek.core.ports import AsyncFileReaderPort, CachePort, FileReaderPort


__all__ = [
    "NOT_FOUND",
    "AsyncFileReaderPort",
    "CachePort",
    "Empty",
    "ExplorerOptions",
    "FileReaderPort",
    "Found",
    "NotFound",
    "SearchResult",
]
