"""Ensure a blueprint's folders and files exist below a base directory."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from layoutkit.blueprint.models import Blueprint, FileEntry, FolderEntry
from layoutkit.core.events import Monitor, MonitoringEvent, Observer
from layoutkit.core.paths import resolve_entry_path
from layoutkit.core.template import populate_template

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SetupResult:
    """Outcome of ensure_setup.

    Attributes:
        created_paths: Absolute paths created or written, sorted lexically.
        events: Monitoring events emitted during the call.
        error: Exception that aborted the walk, None on success.
    """

    created_paths: list[str] = field(default_factory=list)
    events: list[MonitoringEvent] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """True if the whole blueprint was applied."""
        return self.error is None


def ensure_setup(
    base_dir: str | os.PathLike[str],
    blueprint: Blueprint,
    observer: Observer | None = None,
    *,
    encoding: str = "utf-8",
) -> SetupResult:
    """Create the folders and files declared by a blueprint.

    ``blueprint.content`` is sorted in place by ascending path before
    processing, so parents declared as folders are created before the
    files inside them. The caller's blueprint keeps that order.

    Folders that already exist are skipped. A file's missing parent
    directory is created and reported. Files are always rendered and
    written, overwriting existing content, and always reported.

    The first exception aborts the walk. It is reported as a single
    ``error`` event and the paths created so far are returned.

    Args:
        base_dir: Existing directory that entry paths are relative to.
        blueprint: Layout to apply.
        observer: Optional monitoring callback.
        encoding: Encoding for written files.

    Returns:
        SetupResult with the sorted created paths.
    """
    monitor = Monitor(observer, log=logger)
    created: list[str] = []
    error: Exception | None = None

    try:
        blueprint.content.sort(key=lambda entry: entry.path)

        for entry in blueprint.content:
            item_path = resolve_entry_path(base_dir, entry.path)

            if isinstance(entry, FolderEntry):
                if not os.path.exists(item_path):
                    Path(item_path).mkdir(parents=True)
                    monitor.info(f"Created folder: {item_path}", {"path": item_path})
                    created.append(item_path)
            elif isinstance(entry, FileEntry):
                parent = os.path.dirname(item_path)
                if not os.path.exists(parent):
                    Path(parent).mkdir(parents=True)
                    monitor.info(
                        f"Created parent directory for file: {parent}",
                        {"path": parent},
                    )
                    created.append(parent)

                content = populate_template(entry.template, entry.data, monitor.as_observer())
                Path(item_path).write_text(content, encoding=encoding)
                monitor.info(f"Created file: {item_path}", {"path": item_path})
                created.append(item_path)
            else:
                logger.debug("Skipping unsupported blueprint entry: %r", entry)
    except Exception as e:
        error = e
        monitor.error(f"Error in ensure_setup. Details: {e}", {"error": e})

    created.sort()
    return SetupResult(created_paths=created, events=monitor.events, error=error)
