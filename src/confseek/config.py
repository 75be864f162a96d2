"""Configuration utilities for confseek.

This module builds explorer options from a module name and resolves the
paths a search starts from: the start directory and the XDG fallback root.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from confseek.adapters.loaders import default_loaders
from confseek.core.exceptions import ConfigurationError
from confseek.core.models import ExplorerOptions, identity


if TYPE_CHECKING:
    from confseek.core.models import Loader, Transform


def default_search_places(module_name: str) -> tuple[str, ...]:
    """Default candidate filenames for a module, highest precedence first.

    Example:
        >>> default_search_places("demo")[:3]
        ('pyproject.toml', '.demorc', '.demorc.json')
    """
    return (
        "pyproject.toml",
        f".{module_name}rc",
        f".{module_name}rc.json",
        f".{module_name}rc.yaml",
        f".{module_name}rc.yml",
        f".{module_name}rc.toml",
        f".{module_name}rc.py",
        f".config/{module_name}rc",
        f".config/{module_name}rc.json",
        f".config/{module_name}rc.yaml",
        f".config/{module_name}rc.yml",
        f".config/{module_name}rc.toml",
        f".config/{module_name}rc.py",
        f"{module_name}.config.py",
    )


def default_xdg_search_places() -> tuple[str, ...]:
    """Default candidate filenames under $XDG_CONFIG_HOME/<package_prop>/."""
    return (
        "config",
        "config.json",
        "config.yaml",
        "config.yml",
        "config.toml",
        "config.py",
    )


def xdg_config_home() -> Path | None:
    """Resolve the XDG base configuration directory.

    Uses $XDG_CONFIG_HOME when it is set to an absolute path, otherwise
    ~/.config.

    Returns:
        The directory, or None if no home directory can be determined.
    """
    env_value = os.environ.get("XDG_CONFIG_HOME")
    if env_value and os.path.isabs(env_value):
        return Path(env_value)
    try:
        return Path.home() / ".config"
    except RuntimeError:
        return None


def get_directory(search_from: Path | str) -> Path:
    """Return search_from if it is a directory, else its parent.

    A path that does not exist is treated like a file.
    """
    path = Path(search_from)
    if path.is_dir():
        return path
    return path.parent


def build_options(
    module_name: str,
    *,
    package_prop: str | None = None,
    search_places: Iterable[str] | None = None,
    loaders: Mapping[str, Loader] | None = None,
    xdg: bool = False,
    xdg_search_places: Iterable[str] | None = None,
    xdg_config_home: Path | str | None = None,
    stop_dir: Path | str | None = None,
    stop_on_empty: bool = False,
    transform: Transform | None = None,
    cache: bool = True,
    search_cache: bool | None = None,
    load_cache: bool | None = None,
) -> ExplorerOptions:
    """Build explorer options, filling in defaults for a module name.

    Args:
        module_name: Name of the tool, e.g. "demo".
        package_prop: Property under [tool] in pyproject.toml and the
            subdirectory under the XDG root. Defaults to module_name.
        search_places: Candidate filenames in precedence order. Defaults
            to default_search_places(module_name).
        loaders: Extra loaders, merged over default_loaders().
        xdg: Whether to fall back to the XDG config directory.
        xdg_search_places: Candidate filenames under the XDG root.
        xdg_config_home: Explicit XDG root, overriding the environment.
        stop_dir: Directory at which ascent stops.
        stop_on_empty: Whether a blank candidate file ends the search.
        transform: Applied to every final result. Defaults to identity.
        cache: Default for both caches.
        search_cache: Override for the directory search cache.
        load_cache: Override for the explicit load cache.

    Returns:
        Frozen ExplorerOptions.

    Raises:
        ConfigurationError: If module_name or search_places is empty.
    """
    if not module_name:
        raise ConfigurationError("module_name cannot be empty")

    prop = package_prop or module_name
    places = tuple(search_places) if search_places is not None else None
    if places is not None and not places:
        raise ConfigurationError("search_places cannot be empty")

    merged_loaders = default_loaders(prop)
    if loaders:
        merged_loaders.update(loaders)

    return ExplorerOptions(
        module_name=module_name,
        package_prop=prop,
        search_places=places or default_search_places(module_name),
        loaders=merged_loaders,
        xdg=xdg,
        xdg_search_places=(
            tuple(xdg_search_places)
            if xdg_search_places is not None
            else default_xdg_search_places()
        ),
        xdg_config_home=Path(xdg_config_home) if xdg_config_home else None,
        stop_dir=Path(stop_dir) if stop_dir else None,
        stop_on_empty=stop_on_empty,
        transform=transform or identity,
        cache=cache,
        search_cache=search_cache,
        load_cache=load_cache,
    )
