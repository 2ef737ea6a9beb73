"""Utility modules for dux.

This module exports commonly used utility functions.
"""

from dux.utils.formatting import (
    console,
    err_console,
    format_bytes,
    format_index,
    format_name,
    format_size_column,
    print_error,
    print_info,
)
from dux.utils.shell import CommandResult, OpenPathError, command_exists, open_path, run_command

__all__ = [
    "CommandResult",
    "OpenPathError",
    "command_exists",
    "console",
    "err_console",
    "format_bytes",
    "format_index",
    "format_name",
    "format_size_column",
    "open_path",
    "print_error",
    "print_info",
    "run_command",
]
