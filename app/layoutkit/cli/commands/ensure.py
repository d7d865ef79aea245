"""Ensure command implementation.

Applies a blueprint below a base directory.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from layoutkit.blueprint.ensurer import ensure_setup
from layoutkit.blueprint.io import implicit_data, prepare_blueprint, require_blueprint
from layoutkit.cli.display import print_events, print_paths
from layoutkit.core.config import require_config
from layoutkit.utils.formatting import print_error, print_info, print_success


app = typer.Typer(
    help="Apply a blueprint below a base directory.",
    invoke_without_command=True,
    context_settings={"allow_interspersed_args": True},
)


@app.callback(invoke_without_command=True)
def ensure(
    blueprint_path: Annotated[
        Path,
        typer.Argument(help="Blueprint TOML file."),
    ],
    base: Annotated[
        Path,
        typer.Option(
            "--base",
            "-b",
            help="Base directory the layout is created in.",
        ),
    ] = Path("."),
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file (default: ~/.config/layoutkit/config.toml).",
        ),
    ] = None,
) -> None:
    """Create the folders and files declared by a blueprint.

    Existing folders are left alone; files are always (re)written.

    Examples:
        layoutkit ensure layout.toml
        layoutkit ensure layout.toml --base ./build
    """
    config = require_config(config_path)
    blueprint = require_blueprint(blueprint_path)

    if not base.is_dir():
        print_error(f"Base directory does not exist: {base}")
        raise typer.Exit(code=1)

    prepared = prepare_blueprint(blueprint, implicit_data(base, config.data))
    result = ensure_setup(base, prepared, encoding=config.encoding)

    print_events(result.events)

    if result.created_paths:
        print_paths("Created Paths", result.created_paths, "created", "added")
    else:
        print_info("Nothing to create.")

    if not result.ok:
        print_error(f"Setup aborted: {escape(str(result.error))}")
        raise typer.Exit(code=1)

    print_success(f"Layout ensured ({len(result.created_paths)} path(s) written).")
