"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from freelancerpro.cli.utils.formatters import format_error, format_warning
from freelancerpro.services.kanban import InvalidTransitionError
from freelancerpro.storage import (
    DataCorruptionError,
    StorageReadError,
    StorageWriteError,
)


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    exit_code = 1
    title = "Error"

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class NotLoggedInError(CLIError):
    """A command needs a current user and there is none."""

    exit_code = 1
    title = "Not Logged In"

    def __init__(self):
        super().__init__(
            "No user is logged in",
            recovery_hint="Run 'freelancerpro login' or 'freelancerpro seed-demo' first",
        )


class RecordNotFoundError(CLIError):
    """A referenced record does not exist."""

    exit_code = 2
    title = "Not Found"


class AuthenticationFailedError(CLIError):
    """Login or registration was rejected."""

    exit_code = 8
    title = "Authentication Failed"


def _echo_with_hint(title: str, message: str, hint: Optional[str] = None) -> None:
    click.echo(format_error(f"{title}: {message}"))
    if hint:
        click.echo(format_warning(f"Hint: {hint}"))


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Print a user-friendly message for ``error``.

    Args:
        error: The exception that occurred
        debug: Whether to show the full stack trace for unexpected errors

    Returns:
        Process exit code
    """
    if isinstance(error, CLIError):
        _echo_with_hint(error.title, error.message, error.recovery_hint)
        return error.exit_code

    if isinstance(error, ValidationError):
        click.echo(format_error("Invalid Input"))
        for detail in error.errors():
            location = ".".join(str(part) for part in detail["loc"]) or "value"
            click.echo(f"  {location}: {detail['msg']}")
        return 3

    if isinstance(error, InvalidTransitionError):
        _echo_with_hint(
            "Move Not Allowed",
            str(error),
            "Strict Kanban transitions are enabled (KANBAN_STRICT_TRANSITIONS)",
        )
        return 4

    if isinstance(error, DataCorruptionError):
        _echo_with_hint(
            "Corrupt Data",
            error.message,
            "Inspect or restore the data file; nothing was overwritten",
        )
        return 5

    if isinstance(error, StorageReadError):
        _echo_with_hint("Storage Read Error", error.message)
        return 6

    if isinstance(error, StorageWriteError):
        _echo_with_hint(
            "Storage Write Error",
            error.message,
            "Check free disk space and permissions of the data directory",
        )
        return 7

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return 130

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
    click.echo(str(error))
    if debug:
        click.echo("\nFull stack trace:")
        click.echo("".join(traceback.format_exception(type(error), error, error.__traceback__)))
    else:
        click.echo(format_warning("\nRun with --debug flag for full stack trace"))
    return 255


class _ErrorHandler:
    """Context manager turning exceptions into friendly output and exit codes."""

    def __init__(self, show_debug: bool):
        self.show_debug = show_debug

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is None or isinstance(exc_val, (click.exceptions.Exit, SystemExit)):
            return False
        sys.exit(handle_cli_error(exc_val, self.show_debug))


def with_error_handling(debug: bool = False) -> _ErrorHandler:
    """
    Standard error handling for command bodies.

    Example:
        @click.command()
        @click.pass_obj
        def my_command(app):
            with with_error_handling(app.debug):
                ...
    """
    return _ErrorHandler(debug)
