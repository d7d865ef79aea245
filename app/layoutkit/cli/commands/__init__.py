"""CLI commands for layoutkit.

This package contains all subcommand implementations.
"""

from layoutkit.cli.commands import clean, ensure, init, render

__all__ = ["clean", "ensure", "init", "render"]
