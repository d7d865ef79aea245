"""Blueprint file I/O and data preparation.

Blueprints are TOML files validated with the Pydantic models in
layoutkit.blueprint.models.
"""

import logging
import tomllib
from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from layoutkit.blueprint.models import Blueprint, FileEntry
from layoutkit.core.merge import merge_data

logger = logging.getLogger(__name__)


class BlueprintError(Exception):
    """Base exception for blueprint-related errors."""


class BlueprintNotFoundError(BlueprintError):
    """Raised when a blueprint file is not found."""


class BlueprintParseError(BlueprintError):
    """Raised when a blueprint file cannot be parsed."""


class BlueprintValidationError(BlueprintError):
    """Raised when blueprint content is invalid."""


def load_blueprint(path: Path) -> Blueprint:
    """Load and validate a blueprint from a TOML file.

    Args:
        path: Path to the blueprint file.

    Returns:
        Validated Blueprint object.

    Raises:
        BlueprintNotFoundError: If the file doesn't exist.
        BlueprintParseError: If the TOML syntax is invalid.
        BlueprintValidationError: If the content doesn't match the schema.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise BlueprintNotFoundError(f"Blueprint not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise BlueprintParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise BlueprintError(f"Failed to read blueprint: {e}") from e

    try:
        return Blueprint.model_validate(data)
    except ValidationError as e:
        raise BlueprintValidationError(f"Invalid blueprint content: {e}") from e


def save_blueprint(blueprint: Blueprint, path: Path) -> Path:
    """Save a blueprint to a TOML file, creating parent directories.

    Args:
        blueprint: The Blueprint to save.
        path: Destination path.

    Returns:
        Path where the blueprint was saved.

    Raises:
        BlueprintError: If the file cannot be written.
    """
    data = blueprint.model_dump(mode="json", exclude_none=True)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(tomli_w.dumps(data), encoding="utf-8")
    except OSError as e:
        raise BlueprintError(f"Failed to write blueprint: {e}") from e

    logger.debug("Saved blueprint to %s", path)
    return path


def implicit_data(base_dir: Path, extra: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build the implicit template data for a base directory.

    Provides ``base_dir``, ``base_name`` and ``date`` (ISO format),
    followed by any configured extra values.
    """
    resolved = base_dir.resolve()
    data: dict[str, Any] = {
        "base_dir": str(resolved),
        "base_name": resolved.name,
        "date": date.today().isoformat(),
    }
    if extra:
        data.update(extra)
    return data


def prepare_blueprint(blueprint: Blueprint, implicit: Mapping[str, Any]) -> Blueprint:
    """Compute the effective template data of every file entry.

    Each file's data becomes ``merge_data(implicit, blueprint.data,
    entry.data)``. Folder entries are passed through unchanged.

    Args:
        blueprint: Blueprint as loaded.
        implicit: Lowest-precedence data (see implicit_data).

    Returns:
        A new Blueprint; the input is not modified.
    """
    content = [
        entry.model_copy(update={"data": merge_data(implicit, blueprint.data, entry.data)})
        if isinstance(entry, FileEntry)
        else entry
        for entry in blueprint.content
    ]
    return blueprint.model_copy(update={"content": content})


def require_blueprint(path: Path) -> Blueprint:
    """Load a blueprint or exit with a helpful error message.

    Args:
        path: Path to the blueprint file.

    Returns:
        Loaded and validated Blueprint.

    Raises:
        typer.Exit: If the blueprint cannot be loaded.
    """
    import typer

    from layoutkit.utils.formatting import print_error, print_info

    try:
        return load_blueprint(path)
    except BlueprintNotFoundError as e:
        print_error(f"Blueprint not found: {path}")
        print_info("Run 'layoutkit init' to create a starter blueprint.")
        raise typer.Exit(code=1) from e
    except BlueprintError as e:
        print_error(f"Failed to load blueprint: {e}")
        raise typer.Exit(code=1) from e
