"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator

import pytest
from layoutkit.blueprint.models import Blueprint, FileEntry, FolderEntry
from layoutkit.core.events import MonitoringEvent


@pytest.fixture(autouse=True)
def restore_layoutkit_logger() -> Iterator[None]:
    """Undo logging configuration done by CLI invocations."""
    log = logging.getLogger("layoutkit")
    handlers, level = list(log.handlers), log.level
    yield
    log.handlers = handlers
    log.setLevel(level)


@pytest.fixture
def events() -> list[MonitoringEvent]:
    """List that collects monitoring events (pass ``events.append`` as observer)."""
    return []


@pytest.fixture
def sample_blueprint() -> Blueprint:
    """Blueprint with a folder and a file inside it."""
    return Blueprint(
        content=[
            FolderEntry(path="/a"),
            FileEntry(path="/a/b.txt", template="hi {{n}}", data={"n": "Bob"}),
        ]
    )


@pytest.fixture
def sample_blueprint_toml() -> str:
    """Blueprint TOML document with shared and per-file data."""
    return """name = "demo"

[data]
project = "demo"
owner = "team"

[[content]]
type = "folder"
path = "src"

[[content]]
type = "file"
path = "README.md"
template = "# {{project}} by {{owner}}"

[content.data]
owner = "alice"
"""
