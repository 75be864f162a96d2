"""Search command for CLI."""

from __future__ import annotations

from pathlib import Path

import typer

from confseek.cli.formatting import print_result
from confseek.cli.main import app, cli_options, configure_logging, run_explorer


@app.command()
def search(
    module_name: str = typer.Argument(..., help="Name of the tool, e.g. 'demo'."),
    search_from: Path | None = typer.Option(
        None,
        "--from",
        "-f",
        help="File or directory to start from. Defaults to current directory.",
    ),
    places: list[str] | None = typer.Option(
        None,
        "--place",
        "-p",
        help="Search place, highest precedence first. Repeat to add more.",
    ),
    xdg: bool = typer.Option(
        False,
        "--xdg/--no-xdg",
        help="Fall back to $XDG_CONFIG_HOME/<module>/ when nothing is found.",
    ),
    stop_on_empty: bool = typer.Option(
        False,
        "--stop-on-empty",
        help="Stop at the first blank config file instead of searching further.",
    ),
    stop_dir: Path | None = typer.Option(
        None,
        "--stop-dir",
        help="Do not search above this directory.",
    ),
    use_sync: bool = typer.Option(
        False,
        "--sync",
        help="Use the blocking explorer.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every probe and cache hit.",
    ),
) -> None:
    """Search for a tool's configuration from a directory upwards."""
    configure_logging(verbose)
    options = cli_options(
        module_name,
        places=places,
        xdg=xdg,
        stop_on_empty=stop_on_empty,
        stop_dir=stop_dir,
    )

    result = run_explorer(
        options,
        use_sync=use_sync,
        sync_call=lambda explorer: explorer.search_sync(search_from),
        async_call=lambda explorer: explorer.search(search_from),
    )
    print_result(result, module_name)
