"""Blueprint models, loading, and the setup ensurer.

A blueprint declares folders and templated files that should exist
below a base directory.
"""

from layoutkit.blueprint.ensurer import SetupResult, ensure_setup
from layoutkit.blueprint.io import (
    BlueprintError,
    BlueprintNotFoundError,
    BlueprintParseError,
    BlueprintValidationError,
    load_blueprint,
    prepare_blueprint,
    require_blueprint,
    save_blueprint,
)
from layoutkit.blueprint.models import Blueprint, BlueprintEntry, FileEntry, FolderEntry

__all__ = [
    "Blueprint",
    "BlueprintEntry",
    "BlueprintError",
    "BlueprintNotFoundError",
    "BlueprintParseError",
    "BlueprintValidationError",
    "FileEntry",
    "FolderEntry",
    "SetupResult",
    "ensure_setup",
    "load_blueprint",
    "prepare_blueprint",
    "require_blueprint",
    "save_blueprint",
]
