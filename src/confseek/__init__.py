"""confseek - Find and load a tool's configuration file.

This library searches a directory and its ancestors for the first of a
prioritized list of candidate files, parses it with a loader chosen by
filename or extension, and caches the outcome per directory.

Example:
    >>> from confseek import ExplorerSync, Found
    >>> explorer = ExplorerSync.from_module_name("demo")
    >>> result = explorer.search_sync()  # doctest: +SKIP
    >>> if isinstance(result, Found):  # doctest: +SKIP
    ...     print(result.filepath, result.config)
"""

from confseek.adapters.cache import MemoryCache
from confseek.adapters.loaders import default_loaders
from confseek.adapters.readers import AsyncFilesystemReader, FilesystemReader
from confseek.config import (
    build_options,
    default_search_places,
    default_xdg_search_places,
)
from confseek.core.exceptions import (
    ConfigAccessError,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigurationError,
    ConfseekError,
    InvalidFilePathError,
    LoaderNotFoundError,
)
from confseek.core.models import (
    NOT_FOUND,
    Empty,
    ExplorerOptions,
    Found,
    NotFound,
    SearchResult,
)
from confseek.core.ports import AsyncFileReaderPort, CachePort, FileReaderPort
from confseek.core.services import Explorer, ExplorerSync


__version__ = "0.1.0"

__all__ = [
    "NOT_FOUND",
    "AsyncFileReaderPort",
    "AsyncFilesystemReader",
    "CachePort",
    "ConfigAccessError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigurationError",
    "ConfseekError",
    "Empty",
    "Explorer",
    "ExplorerOptions",
    "ExplorerSync",
    "FileReaderPort",
    "FilesystemReader",
    "Found",
    "InvalidFilePathError",
    "LoaderNotFoundError",
    "MemoryCache",
    "NotFound",
    "SearchResult",
    "__version__",
    "build_options",
    "default_loaders",
    "default_search_places",
    "default_xdg_search_places",
]
