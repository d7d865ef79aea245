"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from layoutkit import __version__
from layoutkit.cli.commands import clean, ensure, init, render
from layoutkit.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="layoutkit",
    help="Declarative directory scaffolding and cleanup.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"layoutkit version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging to stderr through Rich."""
    # Messages meant for the user are printed by the commands themselves;
    # the log trail is only shown with --verbose.
    level = logging.DEBUG if verbose else logging.CRITICAL
    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    log = logging.getLogger("layoutkit")
    log.handlers = [handler]
    log.setLevel(level)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """layoutkit - Declarative directory scaffolding and cleanup.

    Describe folders and templated files in a blueprint, make sure they
    exist, and wipe generated output by glob pattern.
    """
    configure_logging(verbose)


# Register commands
app.add_typer(init.app, name="init")
app.add_typer(ensure.app, name="ensure")
app.add_typer(render.app, name="render")
app.add_typer(clean.app, name="clean")


if __name__ == "__main__":
    app()
