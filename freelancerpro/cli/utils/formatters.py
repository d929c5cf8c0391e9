"""Output formatting utilities for CLI."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import click


def format_success(message: str) -> str:
    """Format a success message in green."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message in red."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message in yellow."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message in blue."""
    return click.style(f"ℹ {message}", fg="blue")


def format_money(amount: Optional[Decimal]) -> str:
    """Render an amount as ``$1,234.50``; missing amounts render as ``-``."""
    if amount is None:
        return "-"
    return f"${amount:,.2f}"


def format_date(value: Optional[datetime]) -> str:
    """Render a timestamp as ``YYYY-MM-DD``; missing dates render as ``-``."""
    if value is None:
        return "-"
    return value.strftime("%Y-%m-%d")


def format_table(headers: List[str], rows: List[List[str]], max_width: int = 40) -> str:
    """Format data as a plain-text table.

    Args:
        headers: List of column headers
        rows: List of data rows (each row is a list of cell values)
        max_width: Maximum width of any column; longer cells are truncated

    Returns:
        Formatted table as a string
    """
    if not headers:
        return ""

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(headers)]):
            col_widths[i] = max(col_widths[i], len(str(cell)))
    col_widths = [min(w, max_width) for w in col_widths]

    def render(cells) -> str:
        padded = [
            f" {str(cell)[: col_widths[i]]:<{col_widths[i]}} "
            for i, cell in enumerate(cells[: len(headers)])
        ]
        return "|" + "|".join(padded) + "|"

    separator = "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"
    lines = [separator, render(headers), separator]
    if rows:
        lines.extend(render(row) for row in rows)
        lines.append(separator)
    return "\n".join(lines)
