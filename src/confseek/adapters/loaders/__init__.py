"""Loader adapters turning raw file content into configuration values.

- JSON: load_json
- YAML: load_yaml (also the default for extensionless rc files)
- TOML: load_toml, make_pyproject_loader
- Python: load_python
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from confseek.adapters.loaders.json import load_json
from confseek.adapters.loaders.python import load_python
from confseek.adapters.loaders.toml import load_toml, make_pyproject_loader
from confseek.adapters.loaders.yaml import load_yaml
from confseek.core.loaders import NO_EXTENSION


if TYPE_CHECKING:
    from confseek.core.models import Loader


def default_loaders(package_prop: str) -> dict[str, Loader]:
    """Build the default loader registry.

    Args:
        package_prop: Property under [tool] read from pyproject.toml.

    Returns:
        Mapping of filename or extension to loader.
    """
    return {
        "pyproject.toml": make_pyproject_loader(package_prop),
        ".json": load_json,
        ".yaml": load_yaml,
        ".yml": load_yaml,
        ".toml": load_toml,
        ".py": load_python,
        NO_EXTENSION: load_yaml,
    }


__all__ = [
    "default_loaders",
    "load_json",
    "load_python",
    "load_toml",
    "load_yaml",
    "make_pyproject_loader",
]
