"""Places command for CLI."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from confseek.cli.formatting import places_table
from confseek.cli.main import app, cli_options
from confseek.core.loaders import loader_key


@app.command()
def places(
    module_name: str = typer.Argument(..., help="Name of the tool, e.g. 'demo'."),
    xdg: bool = typer.Option(
        False,
        "--xdg",
        help="List the places searched under the XDG config directory instead.",
    ),
) -> None:
    """List the files searched for in each directory, highest precedence first."""
    options = cli_options(module_name)

    if xdg:
        search_places = [
            f"{options.package_prop}/{place}" for place in options.xdg_search_places
        ]
    else:
        search_places = list(options.search_places)

    keys = []
    for place in search_places:
        name = Path(place).name
        keys.append(name if name in options.loaders else loader_key(Path(place)))

    Console().print(places_table(search_places, keys))
