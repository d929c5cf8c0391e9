"""Unit tests for CLI output formatters."""

from datetime import datetime, timezone
from decimal import Decimal

import click

from freelancerpro.cli.utils import (
    format_date,
    format_error,
    format_info,
    format_money,
    format_success,
    format_table,
    format_warning,
)


class TestMessageFormatters:
    def test_prefixes(self):
        assert click.unstyle(format_success("done")) == "✓ done"
        assert click.unstyle(format_error("bad")) == "✗ bad"
        assert click.unstyle(format_warning("careful")) == "⚠ careful"
        assert click.unstyle(format_info("note")) == "ℹ note"


class TestValueFormatters:
    def test_money(self):
        assert format_money(Decimal("15000")) == "$15,000.00"
        assert format_money(Decimal("1234.5")) == "$1,234.50"
        assert format_money(None) == "-"

    def test_date(self):
        assert format_date(datetime(2024, 2, 25, tzinfo=timezone.utc)) == "2024-02-25"
        assert format_date(None) == "-"


class TestFormatTable:
    def test_layout(self):
        table = format_table(["ID", "Name"], [["c1", "Acme"]])
        lines = table.splitlines()
        assert lines[0] == "+----+------+"
        assert lines[1] == "| ID | Name |"
        assert lines[3] == "| c1 | Acme |"
        assert len(lines) == 5

    def test_truncates_long_cells(self):
        table = format_table(["Notes"], [["x" * 100]], max_width=10)
        assert "| xxxxxxxxxx |" in table

    def test_no_headers(self):
        assert format_table([], [["a"]]) == ""
