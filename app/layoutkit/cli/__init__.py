"""CLI package for layoutkit.

This package contains the Typer application and all subcommands.
"""

from layoutkit.cli.main import app

__all__ = ["app"]
