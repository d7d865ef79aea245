"""Render command implementation.

Renders a single template file to stdout.
"""

import tomllib
from pathlib import Path
from typing import Annotated

import typer

from layoutkit.cli.display import print_events
from layoutkit.core.config import require_config
from layoutkit.core.events import Monitor
from layoutkit.core.merge import merge_data
from layoutkit.core.template import populate_template
from layoutkit.utils.formatting import print_error

app = typer.Typer(
    help="Render a template file to stdout.",
    invoke_without_command=True,
    context_settings={"allow_interspersed_args": True},
)


def parse_assignments(assignments: list[str]) -> dict[str, str]:
    """Parse KEY=VALUE strings into a dictionary.

    Raises:
        typer.BadParameter: If an assignment has no '='.
    """
    data: dict[str, str] = {}
    for item in assignments:
        key, sep, value = item.partition("=")
        if not sep or not key:
            msg = f"Expected KEY=VALUE, got {item!r}"
            raise typer.BadParameter(msg, param_hint="--set")
        data[key] = value
    return data


def _load_data_file(path: Path) -> dict[str, object]:
    """Read template values from a TOML file or exit."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print_error(f"Cannot read data file {path}: {e}")
        raise typer.Exit(code=1) from e


@app.callback(invoke_without_command=True)
def render(
    template_path: Annotated[
        Path,
        typer.Argument(help="Template file with {{key}} placeholders."),
    ],
    assignments: Annotated[
        list[str] | None,
        typer.Option(
            "--set",
            "-s",
            help="Template value as KEY=VALUE (repeatable).",
        ),
    ] = None,
    data_file: Annotated[
        Path | None,
        typer.Option(
            "--data",
            "-d",
            help="TOML file with template values.",
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail if a placeholder has no value."),
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
    """Render a template file and print the result.

    Values come from the config's [data] table, overridden by the
    --data file, overridden by --set.

    Examples:
        layoutkit render README.tmpl --set name=demo
    """
    config = require_config(config_path)
    given = parse_assignments(assignments or [])
    explicit = _load_data_file(data_file) if data_file else {}

    try:
        template = template_path.read_text(encoding=config.encoding)
    except OSError as e:
        print_error(f"Cannot read template {template_path}: {e}")
        raise typer.Exit(code=1) from e

    monitor = Monitor()
    data = merge_data(config.data, explicit, given)
    output = populate_template(template, data, monitor.as_observer())
    print_events(monitor.events)

    if strict and monitor.events:
        raise typer.Exit(code=1)

    typer.echo(output, nl=False)
