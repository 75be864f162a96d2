"""CLI for confseek."""

# Import commands to register them with the app
# These imports have side effects (registering commands with @app.command())
from confseek.cli.commands import load as _load_module  # noqa: F401
from confseek.cli.commands import places as _places_module  # noqa: F401
from confseek.cli.commands import search as _search_module  # noqa: F401
from confseek.cli.main import app, main


__all__ = ["app", "main"]
