"""Shared Rich display functions for operation results.

Provides reusable printers for monitoring events and path listings
used by the ensure, clean and render commands.
"""

from collections.abc import Iterable

from rich.markup import escape

from layoutkit.core.events import MonitoringEvent, Severity
from layoutkit.utils.formatting import console, create_path_table, print_warning


def print_events(events: Iterable[MonitoringEvent]) -> None:
    """Print warning events.

    Info and debug events reach the user through logging (--verbose);
    error events are reported by the calling command.
    """
    for event in events:
        if event.severity == Severity.WARN:
            print_warning(escape(event.message))


def print_paths(title: str, paths: list[str], status: str, style: str) -> None:
    """Print a table of paths sharing one status label.

    Args:
        title: Table title.
        paths: Paths to list.
        status: Label shown in the status column (e.g. "created").
        style: Theme style for the label (e.g. "added").
    """
    table = create_path_table(title)
    for path in paths:
        table.add_row(f"[{style}]{status}[/]", escape(path))
    console.print(table)
