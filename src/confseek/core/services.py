"""Core domain services for confseek."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Any, Self

from confseek.core.exceptions import InvalidFilePathError
from confseek.core.search import ConfigSearch


if TYPE_CHECKING:
    from confseek.core.models import ExplorerOptions
    from confseek.core.ports import AsyncFileReaderPort, CachePort, FileReaderPort


logger = logging.getLogger(__name__)


class ExplorerBase:
    """State shared by both explorers: options, caches and the algorithm."""

    def __init__(
        self,
        options: ExplorerOptions,
        search_cache: CachePort | None = None,
        load_cache: CachePort | None = None,
    ) -> None:
        from confseek.adapters.cache import MemoryCache

        self._options = options
        self._search_cache: CachePort | None = None
        self._load_cache: CachePort | None = None
        if options.search_cache_enabled:
            self._search_cache = (
                search_cache if search_cache is not None else MemoryCache()
            )
        if options.load_cache_enabled:
            self._load_cache = load_cache if load_cache is not None else MemoryCache()
        self._search = ConfigSearch(options, self._search_cache, self._load_cache)

    @classmethod
    def from_module_name(cls, module_name: str, **overrides: Any) -> Self:
        """Create an explorer with default options for a module name.

        Args:
            module_name: Name of the tool, e.g. "demo".
            **overrides: Keyword arguments for confseek.config.build_options().

        Returns:
            Explorer using the default reader and in-memory caches.
        """
        from confseek.config import build_options

        return cls(build_options(module_name, **overrides))

    @property
    def options(self) -> ExplorerOptions:
        """The immutable options of this explorer."""
        return self._options

    def clear_search_cache(self) -> None:
        """Forget all memoized directory searches."""
        if self._search_cache is not None:
            self._search_cache.clear()

    def clear_load_cache(self) -> None:
        """Forget all memoized explicit loads."""
        if self._load_cache is not None:
            self._load_cache.clear()

    def clear_caches(self) -> None:
        """Forget everything memoized by this explorer."""
        self.clear_search_cache()
        self.clear_load_cache()

    def _validate_file_path(self, filepath: Path | str) -> None:
        # Path("") normalizes to ".", which has no parts
        if isinstance(filepath, PurePath) and not filepath.parts:
            raise InvalidFilePathError(filepath)
        if not filepath or not str(filepath).strip():
            raise InvalidFilePathError(filepath)

    def _xdg_root(self) -> Path | None:
        if not self._options.xdg:
            return None
        if self._options.xdg_config_home is not None:
            return self._options.xdg_config_home
        from confseek.config import xdg_config_home

        return xdg_config_home()


class Explorer(ExplorerBase):
    """Non-blocking configuration explorer for asyncio code.

    Reads run in worker threads; loaders and transforms may be coroutine
    functions. Concurrent searches that meet in the same directory share
    the work for it.

    Example:
        >>> explorer = Explorer.from_module_name("demo")
        >>> result = await explorer.search()  # doctest: +SKIP
    """

    def __init__(
        self,
        options: ExplorerOptions,
        *,
        reader: AsyncFileReaderPort | None = None,
        search_cache: CachePort | None = None,
        load_cache: CachePort | None = None,
    ) -> None:
        """Initialize the explorer.

        Args:
            options: Explorer options, see confseek.config.build_options().
            reader: Read primitive. Defaults to AsyncFilesystemReader.
            search_cache: Cache for directory searches, e.g. pre-seeded.
                Ignored when the search cache is disabled.
            load_cache: Cache for explicit loads. Ignored when the load
                cache is disabled.
        """
        from confseek.adapters.executor import AsyncioExecutor
        from confseek.adapters.readers import AsyncFilesystemReader

        super().__init__(options, search_cache, load_cache)
        self._executor = AsyncioExecutor(reader or AsyncFilesystemReader())

    async def search(self, search_from: Path | str | None = None) -> Any:
        """Search for configuration from a path upwards.

        Args:
            search_from: File or directory to start from. Defaults to the
                current working directory.

        Returns:
            Found, Empty or NotFound, passed through the transform.

        Raises:
            LoaderNotFoundError: If a matched file has no loader.
            ConfigReadError: If a candidate file exists but can't be read.
        """
        from confseek.config import get_directory

        if search_from is None:
            search_from = Path.cwd()
        start_dir = await asyncio.to_thread(get_directory, search_from)
        logger.debug(
            "Searching %s config from %s", self._options.module_name, start_dir
        )

        steps = self._search.search(start_dir, self._xdg_root())
        return await self._executor.run(steps)

    async def load(self, filepath: Path | str) -> Any:
        """Load one configuration file without searching.

        Args:
            filepath: Path of the file.

        Returns:
            Found or Empty (or NotFound if the loader returned None),
            passed through the transform.

        Raises:
            InvalidFilePathError: If filepath is empty, including Path("").
            ConfigFileNotFoundError: If the file does not exist.
            LoaderNotFoundError: If the file has no loader.
        """
        self._validate_file_path(filepath)
        logger.debug("Loading %s config from %s", self._options.module_name, filepath)

        return await self._executor.run(self._search.load(filepath))


class ExplorerSync(ExplorerBase):
    """Blocking configuration explorer.

    Same semantics as Explorer, for callers that cannot await. Loaders and
    transforms must be plain functions.

    Example:
        >>> explorer = ExplorerSync.from_module_name("demo")
        >>> result = explorer.search_sync()  # doctest: +SKIP
    """

    def __init__(
        self,
        options: ExplorerOptions,
        *,
        reader: FileReaderPort | None = None,
        search_cache: CachePort | None = None,
        load_cache: CachePort | None = None,
    ) -> None:
        """Initialize the explorer.

        Args:
            options: Explorer options, see confseek.config.build_options().
            reader: Read primitive. Defaults to FilesystemReader.
            search_cache: Cache for directory searches, e.g. pre-seeded.
                Ignored when the search cache is disabled.
            load_cache: Cache for explicit loads. Ignored when the load
                cache is disabled.
        """
        from confseek.adapters.executor import SynchronousExecutor
        from confseek.adapters.readers import FilesystemReader

        super().__init__(options, search_cache, load_cache)
        self._executor = SynchronousExecutor(reader or FilesystemReader())

    def search_sync(self, search_from: Path | str | None = None) -> Any:
        """Search for configuration from a path upwards, blocking.

        See Explorer.search().
        """
        from confseek.config import get_directory

        if search_from is None:
            search_from = Path.cwd()
        start_dir = get_directory(search_from)
        logger.debug(
            "Searching %s config from %s", self._options.module_name, start_dir
        )

        steps = self._search.search(start_dir, self._xdg_root())
        return self._executor.run(steps)

    def load_sync(self, filepath: Path | str) -> Any:
        """Load one configuration file without searching, blocking.

        See Explorer.load().
        """
        self._validate_file_path(filepath)
        logger.debug("Loading %s config from %s", self._options.module_name, filepath)

        return self._executor.run(self._search.load(filepath))
