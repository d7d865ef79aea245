"""Unit tests for blueprint models."""

import pytest
from layoutkit.blueprint.models import Blueprint, FileEntry, FolderEntry
from pydantic import ValidationError


class TestEntries:
    """Tests for FolderEntry and FileEntry."""

    def test_file_defaults(self) -> None:
        """FileEntry defaults to an empty template and data."""
        entry = FileEntry(path="a.txt")
        assert entry.type == "file"
        assert entry.template == ""
        assert entry.data == {}

    def test_empty_path_rejected(self) -> None:
        """Entries must have a non-empty path."""
        with pytest.raises(ValidationError, match="cannot be empty"):
            FolderEntry(path="  ")

    def test_extra_fields_forbidden(self) -> None:
        """Entries reject unknown fields."""
        with pytest.raises(ValidationError):
            FolderEntry(path="a", template="x")  # type: ignore[call-arg]


class TestBlueprint:
    """Tests for Blueprint model."""

    def test_discriminates_on_type(self) -> None:
        """Content dicts are parsed into the matching entry model."""
        blueprint = Blueprint.model_validate(
            {
                "content": [
                    {"type": "folder", "path": "src"},
                    {"type": "file", "path": "a.txt", "template": "x"},
                ]
            }
        )

        assert isinstance(blueprint.content[0], FolderEntry)
        assert isinstance(blueprint.content[1], FileEntry)
        assert [e.path for e in blueprint.folders] == ["src"]
        assert [e.path for e in blueprint.files] == ["a.txt"]

    def test_unknown_type_rejected(self) -> None:
        """Entries with an unknown type are rejected."""
        with pytest.raises(ValidationError):
            Blueprint.model_validate({"content": [{"type": "link", "path": "x"}]})

    def test_content_required(self) -> None:
        """The content list is mandatory."""
        with pytest.raises(ValidationError):
            Blueprint.model_validate({"name": "x"})

    def test_free_form_keys_preserved(self) -> None:
        """Extra top-level keys are kept."""
        blueprint = Blueprint.model_validate({"content": [], "owner": "team"})
        assert blueprint.model_dump()["owner"] == "team"
