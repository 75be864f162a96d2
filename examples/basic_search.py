"""Basic configuration search example.

This example shows the simplest usage pattern: create an explorer for
your tool's name and search from the current directory upwards. The
explorer remembers every directory it visited, so repeated searches are
answered without touching the disk.
"""

from confseek import Empty, ExplorerSync, Found


# Looks for pyproject.toml [tool.mytool], .mytoolrc, .mytoolrc.json, ...
explorer = ExplorerSync.from_module_name("mytool")

result = explorer.search_sync()

match result:
    case Found(config=config, filepath=filepath):
        print(f"Loaded {filepath}: {config}")
    case Empty(filepath=filepath):
        print(f"{filepath} is blank, using defaults")
    case _:
        print("No configuration found, using defaults")

# Second search from the same place is served from the cache
result = explorer.search_sync()

# Drop memoized results after config files changed on disk
explorer.clear_caches()
