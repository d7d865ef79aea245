"""layoutkit - declarative directory scaffolding and cleanup.

Public API for ensuring a blueprint of folders and templated files
exists, and for clearing directory contents by glob pattern.
"""

from layoutkit.blueprint.ensurer import SetupResult, ensure_setup
from layoutkit.blueprint.models import Blueprint, FileEntry, FolderEntry
from layoutkit.cleaner.remover import RemovalResult, clear_folder, remove_folder_contents
from layoutkit.core.events import MonitoringEvent, Observer, Severity
from layoutkit.core.merge import merge_data
from layoutkit.core.template import populate_template

__version__ = "0.1.0"

__all__ = [
    "Blueprint",
    "FileEntry",
    "FolderEntry",
    "MonitoringEvent",
    "Observer",
    "RemovalResult",
    "SetupResult",
    "Severity",
    "__version__",
    "clear_folder",
    "ensure_setup",
    "merge_data",
    "populate_template",
    "remove_folder_contents",
]
