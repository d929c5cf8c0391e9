"""Integrity check command."""

import sys

import click

from freelancerpro.cli.error_handlers import with_error_handling
from freelancerpro.cli.utils.formatters import format_error, format_success, format_warning
from freelancerpro.validators import IntegrityValidator, ValidationSeverity


@click.command(name="validate-data")
@click.option(
    "--severity",
    type=click.Choice(["error", "warning", "info"], case_sensitive=False),
    default="warning",
    show_default=True,
    help="Lowest severity to print",
)
@click.pass_obj
def validate_data(app, severity: str):
    """Check stored data for duplicate ids and dangling references.

    Exits with status 1 when errors are found. Nothing is modified.
    """
    with with_error_handling(app.debug):
        data = app.store.read_document()
        report = IntegrityValidator().validate(data)
        min_severity = ValidationSeverity[severity.upper()]

        for issue in report.filter(min_severity):
            line = str(issue)
            if issue.severity == ValidationSeverity.ERROR:
                click.echo(format_error(line))
            else:
                click.echo(format_warning(line))

        if report.is_valid():
            click.echo(format_success(f"Data is consistent ({report.summary()})"))
        else:
            click.echo(format_error(f"Integrity errors found ({report.summary()})"))
            sys.exit(1)
