"""Session commands: register, login, logout and whoami."""

import click

from freelancerpro.cli.error_handlers import AuthenticationFailedError, with_error_handling
from freelancerpro.cli.utils.formatters import format_info, format_success


@click.command(name="register")
@click.option("--email", prompt=True, help="Login email")
@click.option("--name", prompt=True, help="Display name")
@click.option(
    "--password", prompt=True, hide_input=True, confirmation_prompt=True, help="Password"
)
@click.pass_obj
def register(app, email: str, name: str, password: str):
    """Create a freelancer account and log in.

    Example:
        freelancerpro register --email ana@example.com --name Ana
    """
    with with_error_handling(app.debug):
        result = app.auth.register(email, password, name)
        if not result.success:
            raise AuthenticationFailedError(result.error)
        click.echo(format_success(f"Registered and logged in as {result.user.name}"))


@click.command(name="login")
@click.option("--email", prompt=True, help="Login email")
@click.option("--password", prompt=True, hide_input=True, help="Password")
@click.pass_obj
def login(app, email: str, password: str):
    """Log in with email and password."""
    with with_error_handling(app.debug):
        result = app.auth.login(email, password)
        if not result.success:
            raise AuthenticationFailedError(
                result.error, recovery_hint="Check the email and password"
            )
        click.echo(format_success(f"Logged in as {result.user.name}"))


@click.command(name="logout")
@click.pass_obj
def logout(app):
    """Forget the current user."""
    with with_error_handling(app.debug):
        app.auth.logout()
        click.echo(format_success("Logged out"))


@click.command(name="whoami")
@click.pass_obj
def whoami(app):
    """Show the current user."""
    with with_error_handling(app.debug):
        user = app.auth.get_current_user()
        if user is None:
            click.echo(format_info("Nobody is logged in"))
            return
        click.echo(f"{user.name} <{user.email}> ({user.role.value}, id {user.id})")
