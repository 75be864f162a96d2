"""TOML loader adapters.

load_toml() wraps tomllib.loads(). make_pyproject_loader() builds the
loader registered for "pyproject.toml", which only returns the tool's own
table so that an unrelated pyproject.toml doesn't end the search.
"""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Any

from confseek.core.exceptions import ConfigParseError


if TYPE_CHECKING:
    from pathlib import Path

    from confseek.core.models import Loader


def load_toml(filepath: Path, content: str) -> dict[str, Any]:
    """Parse TOML content.

    Args:
        filepath: Path the content was read from, used in error messages.
        content: Raw file content.

    Returns:
        The decoded TOML document.

    Raises:
        ConfigParseError: If the content is not valid TOML.
    """
    try:
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(
            f"TOML Error in {filepath}:\n{e}",
            filepath=filepath,
            line=getattr(e, "lineno", None),
            cause=e,
        ) from e


def get_property_by_path(source: Any, path: str) -> Any:
    """Look up a dotted property path in nested mappings.

    Args:
        source: The decoded document.
        path: Dotted path such as "tool.demo".

    Returns:
        The value, or None if any segment is missing.
    """
    value = source
    for segment in path.split("."):
        if not isinstance(value, dict) or segment not in value:
            return None
        value = value[segment]
    return value


def make_pyproject_loader(package_prop: str) -> Loader:
    """Build a loader returning the [tool.<package_prop>] table.

    Args:
        package_prop: Dotted property under [tool], e.g. "demo".

    Returns:
        A loader that yields None when the table is absent.
    """

    def load_pyproject(filepath: Path, content: str) -> Any:
        document = load_toml(filepath, content)
        return get_property_by_path(document, f"tool.{package_prop}")

    return load_pyproject
