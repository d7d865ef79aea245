"""Pydantic models describing a blueprint.

A blueprint is stored as TOML::

    name = "demo"

    [data]
    project = "demo"

    [[content]]
    type = "folder"
    path = "src"

    [[content]]
    type = "file"
    path = "README.md"
    template = "# {{project}}"
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Scalar values accepted as template data
DataValue = str | int | float | bool


class FolderEntry(BaseModel):
    """A directory that should exist.

    Attributes:
        type: Discriminator, always "folder".
        path: Directory path relative to the base directory.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["folder"] = "folder"
    path: Annotated[str, Field(description="Path relative to the base directory")]

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Validate that the path is not empty."""
        if not v.strip():
            msg = "Entry path cannot be empty"
            raise ValueError(msg)
        return v


class FileEntry(BaseModel):
    """A file whose content is rendered from a template.

    Attributes:
        type: Discriminator, always "file".
        path: File path relative to the base directory.
        template: Template text with ``{{key}}`` placeholders.
        data: Values substituted into the template.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["file"] = "file"
    path: Annotated[str, Field(description="Path relative to the base directory")]
    template: Annotated[str, Field(description="Template text")] = ""
    data: Annotated[
        dict[str, DataValue],
        Field(default_factory=dict, description="Template data"),
    ]

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Validate that the path is not empty."""
        if not v.strip():
            msg = "Entry path cannot be empty"
            raise ValueError(msg)
        return v


BlueprintEntry = Annotated[FolderEntry | FileEntry, Field(discriminator="type")]


class Blueprint(BaseModel):
    """Declarative layout of folders and files.

    Free-form top-level keys are allowed and preserved so callers can
    keep extra information next to the layout.

    Attributes:
        name: Optional blueprint name.
        data: Template data shared by all file entries.
        content: Folder and file entries, in any order.
    """

    model_config = ConfigDict(extra="allow")

    name: Annotated[str | None, Field(description="Blueprint name")] = None
    data: Annotated[
        dict[str, DataValue],
        Field(default_factory=dict, description="Shared template data"),
    ]
    content: Annotated[list[BlueprintEntry], Field(description="Layout entries")]

    @property
    def folders(self) -> list[FolderEntry]:
        """Folder entries in current content order."""
        return [e for e in self.content if isinstance(e, FolderEntry)]

    @property
    def files(self) -> list[FileEntry]:
        """File entries in current content order."""
        return [e for e in self.content if isinstance(e, FileEntry)]
