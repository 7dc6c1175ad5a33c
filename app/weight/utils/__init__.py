"""Utility modules for weight.

This module exports commonly used utility functions.
"""

from weight.utils.formatting import (
    SIZE_UNITS,
    console,
    display_path,
    err_console,
    format_size,
    print_error,
    print_info,
    print_warning,
)

__all__ = [
    "SIZE_UNITS",
    "console",
    "display_path",
    "err_console",
    "format_size",
    "print_error",
    "print_info",
    "print_warning",
]
