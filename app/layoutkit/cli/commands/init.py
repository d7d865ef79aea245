"""Init command implementation.

Writes a starter blueprint file.
"""

from pathlib import Path
from typing import Annotated

import typer

from layoutkit.blueprint.io import BlueprintError, save_blueprint
from layoutkit.blueprint.models import Blueprint, FileEntry, FolderEntry
from layoutkit.core.paths import DEFAULT_BLUEPRINT_NAME
from layoutkit.utils.formatting import print_error, print_info, print_success

app = typer.Typer(
    help="Write a starter blueprint.",
    invoke_without_command=True,
    context_settings={"allow_interspersed_args": True},
)


def create_starter_blueprint(name: str) -> Blueprint:
    """Build a small example blueprint.

    Args:
        name: Project name stored in the shared data table.

    Returns:
        Blueprint with a source folder, a docs folder and a README.
    """
    return Blueprint(
        name=name,
        data={"project": name},
        content=[
            FolderEntry(path="src"),
            FolderEntry(path="docs"),
            FileEntry(
                path="README.md",
                template="# {{project}}\n\nGenerated on {{date}} in {{base_name}}.\n",
            ),
        ],
    )


@app.callback(invoke_without_command=True)
def init(
    output: Annotated[
        Path,
        typer.Argument(help="Where to write the blueprint."),
    ] = Path(DEFAULT_BLUEPRINT_NAME),
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Project name (default: current directory name)."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file."),
    ] = False,
) -> None:
    """Create a starter blueprint.

    Examples:
        layoutkit init
        layoutkit init layouts/web.toml --name web
    """
    if output.exists() and not force:
        print_error(f"File already exists: {output}")
        print_info("Use --force to overwrite.")
        raise typer.Exit(code=1)

    blueprint = create_starter_blueprint(name or Path.cwd().name)

    try:
        saved = save_blueprint(blueprint, output)
    except BlueprintError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Blueprint written to {saved}")
    print_info(f"Apply it with: layoutkit ensure {saved}")
