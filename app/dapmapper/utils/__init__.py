"""Utility modules for dapmapper.

This module exports commonly used utility functions.
"""

from dapmapper.utils.formatting import (
    console,
    create_mapping_table,
    create_mount_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from dapmapper.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "create_mapping_table",
    "create_mount_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
