"""JSON loader adapter.

Wraps json.loads() to satisfy the Loader signature (filepath, content).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from confseek.core.exceptions import ConfigParseError


if TYPE_CHECKING:
    from pathlib import Path


def load_json(filepath: Path, content: str) -> Any:
    """Parse JSON content.

    Args:
        filepath: Path the content was read from, used in error messages.
        content: Raw file content.

    Returns:
        The decoded JSON value.

    Raises:
        ConfigParseError: If the content is not valid JSON.
    """
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigParseError(
            f"JSON Error in {filepath}:\n{e.msg}",
            filepath=filepath,
            line=e.lineno,
            cause=e,
        ) from e
