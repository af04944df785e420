"""CLI utility functions"""

from .output import (
    console,
    err_console,
    format_metadata_table,
    format_type_trees,
    format_checks,
    echo_json,
    echo_yaml,
    show_discovery_messages,
    print_error,
    print_warning,
)

__all__ = [
    # Consoles
    'console',
    'err_console',

    # Formatting
    'format_metadata_table',
    'format_type_trees',
    'format_checks',
    'echo_json',
    'echo_yaml',
    'show_discovery_messages',

    # Messages
    'print_error',
    'print_warning',
]
