"""Transform results and handle errors with recovery hints.

The transform runs once per search on the final result, NotFound
included, and the transformed value is what gets cached. Here it merges
found settings over defaults so callers always get a plain dict.
"""

from typing import Any

from confseek import ConfseekError, ExplorerSync, Found


DEFAULTS = {"line_length": 88, "strict": False}


def with_defaults(result: Any) -> dict[str, Any]:
    if isinstance(result, Found):
        return {**DEFAULTS, **result.config}
    return dict(DEFAULTS)


explorer = ExplorerSync.from_module_name("mytool", transform=with_defaults)

try:
    settings = explorer.search_sync()
except ConfseekError as e:
    # Parse errors point at the failing line
    print(f"Error: {e}")
    if e.recovery_hint:
        print(f"Hint: {e.recovery_hint}")
else:
    print(settings["line_length"])
