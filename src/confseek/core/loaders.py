"""Loader registry lookup.

Loaders are registered by exact filename (e.g. "pyproject.toml"), by
extension including the dot (e.g. ".json"), or under NO_EXTENSION for
extensionless names such as ".demorc".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from confseek.core.exceptions import LoaderNotFoundError


if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from confseek.core.models import Loader


NO_EXTENSION = "noExt"


def loader_key(filepath: Path) -> str:
    """Return the extension-based registry key for a file.

    Dotfiles without a further suffix have no extension:

        >>> from pathlib import Path
        >>> loader_key(Path("/repo/.demorc"))
        'noExt'
        >>> loader_key(Path("/repo/.demorc.yaml"))
        '.yaml'
    """
    return filepath.suffix or NO_EXTENSION


def get_loader_for_file(loaders: Mapping[str, Loader], filepath: Path) -> Loader:
    """Resolve the loader for a matched file.

    An exact filename entry wins over the extension entry, so a
    "pyproject.toml" loader takes precedence over the ".toml" one.

    Args:
        loaders: The registry to consult.
        filepath: The file that matched a search place.

    Returns:
        The registered loader.

    Raises:
        LoaderNotFoundError: If neither the filename nor its extension is
            registered.
    """
    if filepath.name in loaders:
        return loaders[filepath.name]

    key = loader_key(filepath)
    try:
        return loaders[key]
    except KeyError:
        raise LoaderNotFoundError(filepath, key) from None
