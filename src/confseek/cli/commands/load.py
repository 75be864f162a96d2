"""Load command for CLI."""

from __future__ import annotations

from pathlib import Path

import typer

from confseek.cli.formatting import print_result
from confseek.cli.main import app, cli_options, configure_logging, run_explorer


@app.command()
def load(
    module_name: str = typer.Argument(..., help="Name of the tool, e.g. 'demo'."),
    filepath: Path = typer.Argument(..., help="Config file to load."),
    use_sync: bool = typer.Option(
        False,
        "--sync",
        help="Use the blocking explorer.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log the load.",
    ),
) -> None:
    """Load one config file with the loader matching its name."""
    configure_logging(verbose)
    options = cli_options(module_name)

    result = run_explorer(
        options,
        use_sync=use_sync,
        sync_call=lambda explorer: explorer.load_sync(filepath),
        async_call=lambda explorer: explorer.load(filepath),
    )
    print_result(result, module_name)
