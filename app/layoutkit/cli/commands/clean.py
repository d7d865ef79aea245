"""Clean command implementation.

Removes the (matching) contents of a directory.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from layoutkit.cleaner.remover import clear_folder, match_candidates, usable_patterns
from layoutkit.cli.display import print_events, print_paths
from layoutkit.core.config import require_config
from layoutkit.utils.formatting import print_error, print_info, print_success


app = typer.Typer(
    help="Remove the (matching) contents of a directory.",
    invoke_without_command=True,
    context_settings={"allow_interspersed_args": True},
)


@app.callback(invoke_without_command=True)
def clean(
    target: Annotated[
        Path,
        typer.Argument(help="Directory whose contents are removed."),
    ],
    patterns: Annotated[
        list[str] | None,
        typer.Option(
            "--pattern",
            "-p",
            help="Glob pattern to match (repeatable). Default: everything.",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file (default: ~/.config/layoutkit/config.toml).",
        ),
    ] = None,
) -> None:
    """Delete the contents of a directory, optionally filtered by pattern.

    The directory itself is kept. Without --pattern the configured
    clean_patterns are used; if there are none, everything is deleted.

    Examples:
        layoutkit clean dist
        layoutkit clean build -p "*.log" -p "tmp*"
    """
    config = require_config(config_path)

    if not target.is_dir():
        print_error(f"Not a directory: {target}")
        raise typer.Exit(code=1)

    selected = usable_patterns(patterns) or usable_patterns(config.clean_patterns)

    try:
        planned = match_candidates(str(target), selected)
    except OSError as e:
        print_error(f"Cannot list {target}: {e}")
        raise typer.Exit(code=1) from e

    if not planned:
        print_info("Nothing to clean.")
        return

    label = "Planned Deletions (dry-run)" if dry_run else "Planned Deletions"
    print_paths(label, [str(target / name) for name in planned], "delete", "removed")

    if dry_run:
        print_info(f"Dry-run: {len(planned)} path(s) would be deleted.")
        return

    if not yes:
        confirmed = typer.confirm(
            f"\nProceed with deleting {len(planned)} path(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    result = clear_folder(target, selected)
    print_events(result.events)

    if not result.ok:
        print_error(f"Clearing {escape(str(target))} failed: {escape(str(result.error))}")
        raise typer.Exit(code=1)

    print_success(f"Deleted {len(result.deleted_paths)} path(s).")
