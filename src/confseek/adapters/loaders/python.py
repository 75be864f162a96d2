"""Python module loader adapter.

Executes the configuration file's source as a throwaway module and returns
its module-level `config` attribute.
"""

from __future__ import annotations

import importlib.util
import sys
from typing import TYPE_CHECKING, Any

from confseek.core.exceptions import ConfigParseError


if TYPE_CHECKING:
    from pathlib import Path


def load_python(filepath: Path, content: str) -> Any:
    """Execute a Python config file and extract its `config` attribute.

    The already-read content is executed rather than re-importing the file,
    with __file__ set so the module can locate sibling resources.

    Args:
        filepath: Path of the config file.
        content: Source code of the config file.

    Returns:
        The module's `config` attribute, or None if it defines none.

    Raises:
        ConfigParseError: If the source has a syntax error or raises while
            executing.
    """
    # Generate a unique module name to avoid conflicts
    module_name = f"_confseek_config_{filepath.stem.replace('.', '_')}_{id(filepath)}"

    spec = importlib.util.spec_from_loader(
        module_name, loader=None, origin=str(filepath)
    )
    if spec is None:
        msg = f"Could not load config module from {filepath}"
        raise ImportError(msg)

    module = importlib.util.module_from_spec(spec)
    module.__file__ = str(filepath)
    sys.modules[module_name] = module

    try:
        code = compile(content, str(filepath), "exec")
        exec(code, module.__dict__)  # noqa: S102
    except SyntaxError as e:
        raise ConfigParseError(
            f"Python syntax error in {filepath}: {e.msg}",
            filepath=filepath,
            line=e.lineno,
            cause=e,
        ) from e
    except Exception as e:
        raise ConfigParseError(
            f"Error executing {filepath}: {e}",
            filepath=filepath,
            line=_traceback_line(e, filepath),
            cause=e,
        ) from e
    finally:
        # Clean up to avoid polluting sys.modules
        sys.modules.pop(module_name, None)

    return getattr(module, "config", None)


def _traceback_line(error: Exception, filepath: Path) -> int | None:
    """Find the line in filepath where error was raised, if any."""
    line = None
    tb = error.__traceback__
    while tb is not None:
        if tb.tb_frame.f_code.co_filename == str(filepath):
            line = tb.tb_lineno
        tb = tb.tb_next
    return line
