"""CLI application and shared helpers for confseek."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from confseek.core.exceptions import ConfseekError


if TYPE_CHECKING:
    from collections.abc import Callable, Coroutine
    from pathlib import Path

    from confseek.core.models import ExplorerOptions


app = typer.Typer(
    name="confseek",
    help="Find and load a tool's configuration file.",
    no_args_is_help=True,
)


def configure_logging(verbose: bool) -> None:
    """Send confseek debug logs to stderr through rich when verbose."""
    if not verbose:
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logger = logging.getLogger("confseek")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(handler)


def run_explorer(
    options: ExplorerOptions,
    *,
    use_sync: bool,
    sync_call: Callable[[Any], Any],
    async_call: Callable[[Any], Coroutine[Any, Any, Any]],
) -> Any:
    """Run one explorer operation, turning library errors into exit code 1.

    Args:
        options: Options for the explorer.
        use_sync: Use ExplorerSync instead of Explorer.
        sync_call: Called with an ExplorerSync.
        async_call: Called with an Explorer; the coroutine is run to completion.

    Returns:
        The operation's result.

    Raises:
        typer.Exit: If the library raised a ConfseekError.
    """
    from confseek import Explorer, ExplorerSync

    try:
        if use_sync:
            return sync_call(ExplorerSync(options))
        return asyncio.run(async_call(Explorer(options)))
    except ConfseekError as e:
        typer.echo(f"Error: {e}", err=True)
        if e.recovery_hint:
            typer.echo(f"Hint: {e.recovery_hint}", err=True)
        raise typer.Exit(1) from None


def cli_options(
    module_name: str,
    *,
    places: list[str] | None = None,
    xdg: bool = False,
    stop_on_empty: bool = False,
    stop_dir: Path | None = None,
) -> ExplorerOptions:
    """Build explorer options from command line arguments.

    Raises:
        typer.Exit: If the options are invalid.
    """
    from confseek.config import build_options

    try:
        return build_options(
            module_name,
            search_places=places or None,
            xdg=xdg,
            stop_on_empty=stop_on_empty,
            stop_dir=stop_dir,
        )
    except ConfseekError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def main() -> None:
    """Entry point for the CLI."""
    app()
