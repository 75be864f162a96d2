"""YAML loader adapter.

Wraps yaml.safe_load(). Also used for extensionless rc files, since YAML
accepts JSON as well.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

from confseek.core.exceptions import ConfigParseError


if TYPE_CHECKING:
    from pathlib import Path


def load_yaml(filepath: Path, content: str) -> Any:
    """Parse YAML content.

    Args:
        filepath: Path the content was read from, used in error messages.
        content: Raw file content.

    Returns:
        The decoded YAML value. A file holding only comments decodes to
        None, which the search treats as "no config here".

    Raises:
        ConfigParseError: If the content is not valid YAML.
    """
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        raise ConfigParseError(
            f"YAML Error in {filepath}:\n{e}",
            filepath=filepath,
            line=mark.line + 1 if mark is not None else None,
            cause=e,
        ) from e
