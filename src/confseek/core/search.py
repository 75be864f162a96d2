"""Directory ascent, candidate probing and explicit loads.

ConfigSearch holds the policies shared by both engines and exposes the
search and load algorithms as step generators (see confseek.core.steps).
It performs no I/O itself, so it can be driven by either executor and
tested against an injected, possibly pre-seeded, cache.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from confseek.core.loaders import get_loader_for_file
from confseek.core.models import NOT_FOUND, Empty, Found, NotFound
from confseek.core.steps import Invoke, Memoize, ReadFile


if TYPE_CHECKING:
    from collections.abc import Sequence

    from confseek.core.models import ExplorerOptions
    from confseek.core.ports import CachePort
    from confseek.core.steps import Steps


def absolute_path(path: Path | str) -> Path:
    """Make a path absolute and normalize it without resolving symlinks."""
    return Path(os.path.abspath(path))


class ConfigSearch:
    """Search and load algorithms for one explorer instance.

    Args:
        options: The explorer options.
        search_cache: Cache for directory outcomes, or None to disable.
        load_cache: Cache for explicit loads, or None to disable.
    """

    def __init__(
        self,
        options: ExplorerOptions,
        search_cache: CachePort | None = None,
        load_cache: CachePort | None = None,
    ) -> None:
        self.options = options
        self.search_cache = search_cache
        self.load_cache = load_cache

    # Policies

    def should_stop(self, result: Any) -> bool:
        """Whether a result ends the search.

        Found ends it, Empty ends it only with stop_on_empty. NotFound and
        None never do. Anything else a transform produced counts as found.
        """
        if result is None or isinstance(result, NotFound):
            return False
        if isinstance(result, Empty):
            return self.options.stop_on_empty
        return True

    def next_directory(self, current: Path, result: Any) -> Path | None:
        """Return the directory to search after current, or None to stop."""
        if self.should_stop(result):
            return None
        if self.options.stop_dir is not None and current == absolute_path(
            self.options.stop_dir
        ):
            return None
        parent = current.parent
        if parent == current:
            return None
        return parent

    # Algorithms

    def search(self, start_dir: Path, xdg_root: Path | None = None) -> Steps:
        """Ascend from start_dir, then from xdg_root if nothing was found.

        Args:
            start_dir: Directory to start from.
            xdg_root: Fallback root, or None when unavailable. Ignored
                unless the xdg option is enabled.
        """
        result = yield from self.search_from_directory(
            start_dir, self.options.search_places
        )

        if not self.should_stop(result) and self.options.xdg and xdg_root is not None:
            places = [
                f"{self.options.package_prop}/{place}"
                for place in self.options.xdg_search_places
            ]
            result = yield from self.search_from_directory(xdg_root, places)

        return result

    def search_from_directory(self, directory: Path, places: Sequence[str]) -> Steps:
        """Search one directory and its ancestors, memoizing each visited one."""
        absolute_dir = absolute_path(directory)

        def run() -> Steps:
            result = yield from self.search_directory(absolute_dir, places)
            next_dir = self.next_directory(absolute_dir, result)

            if next_dir is not None:
                return (yield from self.search_from_directory(next_dir, places))

            return (yield Invoke(self.options.transform, (result,)))

        if self.search_cache is not None:
            return (yield Memoize("search", self.search_cache, absolute_dir, run))

        return (yield from run())

    def search_directory(self, directory: Path, places: Sequence[str]) -> Steps:
        """Probe places in order; the first terminal result wins."""
        for place in places:
            result = yield from self.load_search_place(directory, place)

            if self.should_stop(result):
                return result

        return NOT_FOUND

    def load_search_place(self, directory: Path, place: str) -> Steps:
        filepath = directory / place
        content = yield ReadFile(filepath)
        return (yield from self.create_result(filepath, content))

    def create_result(self, filepath: Path, content: str | None) -> Steps:
        """Turn raw content into NotFound, Empty or Found."""
        if content is None:
            return NOT_FOUND
        if content.strip() == "":
            return Empty(filepath=filepath)

        loader = get_loader_for_file(self.options.loaders, filepath)
        config = yield Invoke(loader, (filepath, content))

        if config is None:
            return NOT_FOUND
        return Found(config=config, filepath=filepath)

    def load(self, filepath: Path | str) -> Steps:
        """Load one explicit file, bypassing directory ascent.

        The file path must already be validated as non-empty.
        """
        absolute_file = absolute_path(filepath)

        def run() -> Steps:
            content = yield ReadFile(absolute_file, throw_not_found=True)
            result = yield from self.create_result(absolute_file, content)
            return (yield Invoke(self.options.transform, (result,)))

        if self.load_cache is not None:
            return (yield Memoize("load", self.load_cache, absolute_file, run))

        return (yield from run())
