"""Utility modules for coco.

This module exports commonly used utility functions.
"""

from coco.utils.formatting import (
    Severity,
    console,
    err_console,
    print_entry,
    print_error,
    print_success,
    print_warning,
    render_message,
)

__all__ = [
    "Severity",
    "console",
    "err_console",
    "print_entry",
    "print_error",
    "print_success",
    "print_warning",
    "render_message",
]
