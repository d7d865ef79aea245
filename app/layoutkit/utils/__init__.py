"""Utility modules for layoutkit.

This module exports commonly used utility functions.
"""

from layoutkit.utils.formatting import (
    console,
    create_path_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_path_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
