"""XDG-compliant path management for layoutkit.

XDG defaults:
- Config: ~/.config/layoutkit/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "layoutkit"

# Blueprint file name used by `layoutkit init` when no path is given
DEFAULT_BLUEPRINT_NAME = "layout.toml"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/layoutkit/ (or XDG_CONFIG_HOME/layoutkit/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/layoutkit/config.toml.
    """
    return get_config_dir() / "config.toml"


def resolve_entry_path(base_dir: str | os.PathLike[str], entry_path: str) -> str:
    """Resolve a blueprint entry path against a base directory.

    Entry paths are always relative to the base: a leading separator
    does not make them absolute. The result is normalized and absolute.

    Args:
        base_dir: Base directory of the layout.
        entry_path: Path declared in the blueprint.

    Returns:
        Absolute, normalized path string.
    """
    relative = entry_path.lstrip("/\\")
    return os.path.abspath(os.path.join(os.fspath(base_dir), relative))
