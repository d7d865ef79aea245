"""Pattern-based clearing of directory contents."""

from layoutkit.cleaner.remover import (
    RemovalResult,
    clear_folder,
    match_candidates,
    remove_folder_contents,
)

__all__ = ["RemovalResult", "clear_folder", "match_candidates", "remove_folder_contents"]
