"""Dashboard command."""

import click

from freelancerpro.cli.error_handlers import with_error_handling
from freelancerpro.cli.utils.formatters import format_date, format_money
from freelancerpro.services import build_dashboard
from freelancerpro.services.queries import days_until_due


@click.command(name="dashboard")
@click.option("--limit", type=int, default=5, show_default=True,
              help="Length of the recent project and urgent task lists")
@click.pass_obj
def dashboard(app, limit: int):
    """Show project, client, task and revenue totals."""
    with with_error_handling(app.debug):
        user = app.require_user()
        summary = build_dashboard(app.store, user.id, limit=limit)

        click.echo(click.style(f"Dashboard for {user.name}", bold=True))
        click.echo(f"  Active projects: {summary.active_projects} of {summary.total_projects}")
        click.echo(f"  Active clients:  {summary.active_clients} of {summary.total_clients}")
        click.echo(f"  Pending tasks:   {summary.pending_tasks} of {summary.total_tasks}")
        click.echo(f"  Revenue:         {format_money(summary.revenue)}")

        click.echo("\nRecent projects:")
        if not summary.recent_projects:
            click.echo("  (none)")
        for project in summary.recent_projects:
            click.echo(f"  {project.name} - {project.status.value}, {project.progress}%")

        click.echo("\nUrgent tasks:")
        if not summary.urgent_tasks:
            click.echo("  (none)")
        for task in summary.urgent_tasks:
            days = days_until_due(task)
            when = f"overdue by {-days} day(s)" if days < 0 else f"due in {days} day(s)"
            click.echo(f"  {task.title} - {format_date(task.due_date)} ({when})")
