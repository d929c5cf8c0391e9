"""CLI utility functions."""

from freelancerpro.cli.utils.formatters import (
    format_date,
    format_error,
    format_info,
    format_money,
    format_success,
    format_table,
    format_warning,
)

__all__ = [
    "format_date",
    "format_error",
    "format_info",
    "format_money",
    "format_success",
    "format_table",
    "format_warning",
]
