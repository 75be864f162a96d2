"""Core domain models for confseek.

These models are pure Python dataclasses with no I/O dependencies.
A search or load produces exactly one of three result shapes:

- NotFound: no configuration file exists along the search path.
- Empty: a candidate file exists but its content is blank.
- Found: a loader parsed the file into a configuration value.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class NotFound:
    """No configuration file was found.

    Use the shared NOT_FOUND instance rather than creating new ones;
    instances compare equal either way.
    """

    is_empty = False


@dataclass(frozen=True, slots=True)
class Empty:
    """A candidate file exists but contains only whitespace.

    Distinct from NotFound so callers can tell "explicitly left blank"
    apart from "absent".

    Attributes:
        filepath: Absolute path of the blank file.
    """

    filepath: Path
    config: None = None
    is_empty = True


@dataclass(frozen=True, slots=True)
class Found:
    """A configuration value produced by a loader.

    Attributes:
        config: The parsed configuration value.
        filepath: Absolute path of the file that produced it.

    Example:
        >>> result = Found(config={"debug": True}, filepath=Path("/repo/.demorc"))
        >>> result.config["debug"]
        True
    """

    config: Any
    filepath: Path
    is_empty = False


SearchResult = Found | Empty | NotFound

NOT_FOUND = NotFound()

Loader = Callable[[Path, str], Any]
Transform = Callable[[SearchResult], Any]


def identity(result: SearchResult) -> SearchResult:
    """Default transform: return the result unchanged."""
    return result


@dataclass(frozen=True, slots=True)
class ExplorerOptions:
    """Immutable configuration for an explorer instance.

    Usually created through confseek.config.build_options(), which fills in
    default search places and loaders for a module name.

    Attributes:
        module_name: Name of the tool whose configuration is searched for.
        package_prop: Property under [tool] in pyproject.toml that holds the
            configuration, also the subdirectory used under the XDG root.
        search_places: Ordered relative filenames probed in each directory.
        loaders: Mapping of extension, exact filename or "noExt" to loader.
        xdg: Whether to fall back to the XDG config directory.
        xdg_search_places: Ordered filenames probed under the XDG root.
        xdg_config_home: Explicit XDG root. If None, resolved from the
            environment at search time.
        stop_dir: Directory at which ascent stops, inclusive.
        stop_on_empty: Whether a blank candidate file ends the search.
        transform: Applied to the final result before it is returned.
        cache: Default for both caches.
        search_cache: Overrides cache for directory searches when not None.
        load_cache: Overrides cache for explicit loads when not None.
    """

    module_name: str
    package_prop: str
    search_places: tuple[str, ...]
    loaders: Mapping[str, Loader]
    xdg: bool = False
    xdg_search_places: tuple[str, ...] = ()
    xdg_config_home: Path | None = None
    stop_dir: Path | None = None
    stop_on_empty: bool = False
    transform: Transform = identity
    cache: bool = True
    search_cache: bool | None = None
    load_cache: bool | None = None

    def __post_init__(self) -> None:
        """Validate option fields after initialization."""
        if not self.module_name:
            raise ValueError("ExplorerOptions module_name cannot be empty")
        if not self.search_places:
            raise ValueError("ExplorerOptions search_places cannot be empty")

    @property
    def search_cache_enabled(self) -> bool:
        """Whether directory search results are memoized."""
        return self.cache if self.search_cache is None else self.search_cache

    @property
    def load_cache_enabled(self) -> bool:
        """Whether explicit load results are memoized."""
        return self.cache if self.load_cache is None else self.load_cache
