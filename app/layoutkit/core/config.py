"""User configuration for layoutkit.

Configuration is stored in ~/.config/layoutkit/config.toml and is
optional: a missing file yields the defaults.

Example::

    encoding = "utf-8"
    clean_patterns = ["*.log", "build"]

    [data]
    author = "Jane Doe"
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from layoutkit.core.paths import get_config_path

logger = logging.getLogger(__name__)


class KitConfig(BaseModel):
    """Settings applied by the CLI.

    Attributes:
        encoding: Text encoding used when writing rendered files.
        clean_patterns: Default glob patterns for `layoutkit clean`.
        data: Extra implicit template data available to every file.
    """

    model_config = ConfigDict(extra="forbid")

    encoding: Annotated[str, Field(description="Encoding for written files")] = "utf-8"
    clean_patterns: Annotated[
        list[str],
        Field(default_factory=list, description="Default clean patterns"),
    ]
    data: Annotated[
        dict[str, str | int | float | bool],
        Field(default_factory=dict, description="Implicit template data"),
    ]

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings unknown to the codecs registry."""
        import codecs

        try:
            codecs.lookup(v)
        except LookupError:
            msg = f"Unknown encoding: {v}"
            raise ValueError(msg) from None
        return v


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> KitConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated KitConfig; defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or the content is invalid.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return KitConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return KitConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def require_config(path: Path | None = None) -> KitConfig:
    """Load configuration or exit with a helpful error message.

    Raises:
        typer.Exit: If the config file exists but is invalid.
    """
    import typer

    from layoutkit.utils.formatting import print_error

    try:
        return load_config(path)
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e
