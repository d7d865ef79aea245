"""Remove the contents of a directory, optionally filtered by glob patterns.

The directory itself is never removed. Deletions are dispatched to
worker threads and awaited together.
"""

import asyncio
import glob
import logging
import os
import shutil
import stat
from collections.abc import Sequence
from dataclasses import dataclass, field

from layoutkit.core.events import Monitor, MonitoringEvent, Observer

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RemovalResult:
    """Outcome of remove_folder_contents.

    ``deleted_paths`` lists every path whose deletion was scheduled, in
    scheduling order. Paths are recorded before their deletion finishes,
    so on failure the list may contain paths that were not removed.

    Attributes:
        deleted_paths: Absolute paths scheduled for deletion.
        events: Monitoring events emitted during the call.
        error: Exception that aborted the operation, None on success.
    """

    deleted_paths: list[str] = field(default_factory=list)
    events: list[MonitoringEvent] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """True if every scheduled deletion completed."""
        return self.error is None


def usable_patterns(patterns: Sequence[str] | None) -> list[str]:
    """Drop empty and whitespace-only patterns."""
    return [p for p in patterns or () if p and p.strip()]


def match_candidates(target_dir: str, patterns: Sequence[str] | None = None) -> list[str]:
    """Names inside target_dir selected for deletion.

    With usable patterns, each pattern is globbed relative to target_dir
    (``*``, ``?``, ``[...]`` and ``**``; hidden entries only match
    patterns that start with a dot) and the matches are united in match
    order. Without usable patterns every direct entry is selected.

    Args:
        target_dir: Directory to inspect.
        patterns: Optional glob patterns.

    Returns:
        Relative names, deduplicated, without entries nested inside
        another selected entry.

    Raises:
        OSError: If target_dir cannot be listed.
    """
    entries = os.listdir(target_dir)
    selected = usable_patterns(patterns)
    if not selected:
        return list(dict.fromkeys(entries))

    candidates: dict[str, None] = {}
    for pattern in selected:
        for match in glob.glob(pattern, root_dir=target_dir, recursive=True):
            candidates[os.path.normpath(match)] = None
    return _prune_nested(list(candidates))


def _prune_nested(names: list[str]) -> list[str]:
    """Drop names that lie inside another selected name.

    Removing the outer entry removes them as well.
    """
    selected = set(names)
    kept: list[str] = []
    for name in names:
        parent = os.path.dirname(name)
        while parent and parent not in selected:
            parent = os.path.dirname(parent)
        if not parent:
            kept.append(name)
    return kept


def _remove_tree(path: str) -> None:
    """Remove a directory recursively; a missing target is not an error."""
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        logger.debug("Directory already gone: %s", path)


def _report_detached_failure(task: "asyncio.Task[None]") -> None:
    """Log failures of deletions nobody awaits any more."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Deletion task failed: %s", exc)


async def remove_folder_contents(
    target_dir: str | os.PathLike[str],
    patterns: Sequence[str] | None = None,
    observer: Observer | None = None,
) -> RemovalResult:
    """Delete entries of a directory that match the given patterns.

    Candidates are determined by match_candidates. Each candidate is
    lstat'ed in turn: directories are removed recursively, everything
    else (files, symlinks) is unlinked. Deletions run concurrently and
    are awaited as one batch.

    The first exception (listing, status check or deletion) aborts the
    operation and is reported as a single ``error`` event. Deletions
    already dispatched keep running in the background.

    Args:
        target_dir: Existing, readable directory.
        patterns: Optional glob patterns; blank entries are ignored.
        observer: Optional monitoring callback.

    Returns:
        RemovalResult with the paths scheduled for deletion.
    """
    monitor = Monitor(observer, log=logger)
    folder = os.fspath(target_dir)
    deleted: list[str] = []
    error: Exception | None = None

    try:
        names = await asyncio.to_thread(match_candidates, folder, patterns)

        tasks: list[asyncio.Task[None]] = []
        for name in names:
            file_path = os.path.abspath(os.path.join(folder, name))
            info = await asyncio.to_thread(os.lstat, file_path)

            if stat.S_ISDIR(info.st_mode):
                task = asyncio.create_task(asyncio.to_thread(_remove_tree, file_path))
            else:
                task = asyncio.create_task(asyncio.to_thread(os.unlink, file_path))
            task.add_done_callback(_report_detached_failure)
            tasks.append(task)

            deleted.append(file_path)
            monitor.debug(f'Deleted: "{file_path}"', {"path": file_path})

        await asyncio.gather(*tasks)

        monitor.debug(f'Done clearing (matching) content of folder "{folder}".')
    except Exception as e:
        error = e
        monitor.error(f'Error clearing folder "{folder}". Details: {e}', {"error": e})

    return RemovalResult(deleted_paths=deleted, events=monitor.events, error=error)


def clear_folder(
    target_dir: str | os.PathLike[str],
    patterns: Sequence[str] | None = None,
    observer: Observer | None = None,
) -> RemovalResult:
    """Synchronous wrapper around remove_folder_contents.

    Must not be called from a running event loop.
    """
    return asyncio.run(remove_folder_contents(target_dir, patterns, observer))
