"""Custom search places and loaders.

This example searches for an INI file that the default loaders don't
understand, registering a loader for the ".ini" extension. Loaders
receive the absolute path and the raw text of the file.
"""

import configparser
from pathlib import Path
from typing import Any

from confseek import ExplorerSync


def load_ini(filepath: Path, content: str) -> dict[str, Any]:
    parser = configparser.ConfigParser()
    parser.read_string(content, source=str(filepath))
    return {section: dict(parser[section]) for section in parser.sections()}


explorer = ExplorerSync.from_module_name(
    "mytool",
    search_places=["mytool.ini", ".mytoolrc.json", "setup.cfg"],
    loaders={".ini": load_ini, ".cfg": load_ini},
    # Don't wander above the repository
    stop_dir=Path.home(),
)

result = explorer.search_sync()
print(result)
