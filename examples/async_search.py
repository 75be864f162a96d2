"""Non-blocking search example for asyncio applications.

Explorer never blocks the event loop: files are read in worker threads.
Searches started concurrently from the same tree share the work for the
directories they have in common.
"""

import asyncio
from pathlib import Path

from confseek import Explorer


async def main() -> None:
    explorer = Explorer.from_module_name("mytool", xdg=True)

    # Both searches meet in the repository root; it is probed only once
    frontend, backend = await asyncio.gather(
        explorer.search(Path("services/frontend")),
        explorer.search(Path("services/backend")),
    )
    print(frontend, backend, sep="\n")

    # Explicit loads skip the ascent
    result = await explorer.load(Path("config/production.yaml"))
    print(result)


if __name__ == "__main__":
    asyncio.run(main())
