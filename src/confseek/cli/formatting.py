"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import typer
from rich.console import Console
from rich.table import Table

from confseek.core.models import Empty, Found


if TYPE_CHECKING:
    from collections.abc import Sequence


def print_result(result: Any, module_name: str) -> None:
    """Print a search or load result.

    Found prints the file path and the configuration as JSON, Empty prints
    a notice.

    Raises:
        typer.Exit: With code 1 when nothing was found.
    """
    match result:
        case Found(config=config, filepath=filepath):
            typer.echo(f"Found: {filepath}")
            Console().print_json(data=config, default=str)
        case Empty(filepath=filepath):
            typer.echo(f"Empty config file: {filepath}")
        case _:
            typer.echo(f"No configuration found for '{module_name}'.")
            raise typer.Exit(1)


def places_table(places: Sequence[str], loader_keys: Sequence[str]) -> Table:
    """Build a table of search places in precedence order.

    Args:
        places: Search places.
        loader_keys: Loader key resolved for each place.
    """
    table = Table()
    table.add_column("#", justify="right")
    table.add_column("Search place")
    table.add_column("Loader")

    for index, (place, key) in enumerate(zip(places, loader_keys, strict=True), 1):
        table.add_row(str(index), place, key)

    return table
