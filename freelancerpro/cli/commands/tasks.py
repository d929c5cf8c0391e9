"""Kanban board and task commands."""

from typing import Optional

import click

from freelancerpro.cli.error_handlers import RecordNotFoundError, with_error_handling
from freelancerpro.cli.utils.formatters import format_date, format_info, format_success
from freelancerpro.models import TaskPriority, TaskStatus
from freelancerpro.services.queries import sort_tasks

STATUS_CHOICES = [s.value for s in TaskStatus]


def _require_own_task(app, user, task_id: str) -> None:
    # Tasks of other users are reported as missing
    task = app.store.get_task_by_id(task_id)
    if task is None or task.user_id != user.id:
        raise RecordNotFoundError(f"No task with id {task_id}")


@click.command(name="board")
@click.pass_obj
def board(app):
    """Show the current user's tasks grouped into Kanban columns."""
    with with_error_handling(app.debug):
        user = app.require_user()
        for status, tasks in app.kanban().columns(user.id).items():
            click.echo(click.style(f"{status.value.upper()} ({len(tasks)})", bold=True))
            if not tasks:
                click.echo("  (empty)")
            for task in sort_tasks(tasks):
                click.echo(
                    f"  [{task.priority.value}] {task.title}  "
                    f"{task.id}  due {format_date(task.due_date)}"
                )
            click.echo()


@click.command(name="move-task")
@click.argument("task_id")
@click.argument("status", type=click.Choice(STATUS_CHOICES))
@click.pass_obj
def move_task(app, task_id: str, status: str):
    """Move a task to another Kanban column.

    Example:
        freelancerpro move-task task-3 in_progress
    """
    with with_error_handling(app.debug):
        user = app.require_user()
        _require_own_task(app, user, task_id)
        task = app.kanban().move_task(task_id, status)
        if task is None:
            raise RecordNotFoundError(f"No task with id {task_id}")
        click.echo(format_success(f"Task {task.id} is now {task.status.value}"))


@click.command(name="toggle-task")
@click.argument("task_id")
@click.pass_obj
def toggle_task(app, task_id: str):
    """Mark a task completed, or reopen it if it already is."""
    with with_error_handling(app.debug):
        user = app.require_user()
        _require_own_task(app, user, task_id)
        task = app.kanban().toggle_completion(task_id)
        if task is None:
            raise RecordNotFoundError(f"No task with id {task_id}")
        click.echo(format_success(f"Task {task.id} is now {task.status.value}"))


@click.command(name="add-task")
@click.option("--title", required=True, help="Task title")
@click.option("--description", default=None, help="Task description")
@click.option(
    "--priority",
    type=click.Choice([p.value for p in TaskPriority]),
    default=TaskPriority.MEDIUM.value,
    show_default=True,
)
@click.option("--project", "project_id", default=None, help="Project id")
@click.option("--assignee", "assignee_id", default=None, help="Team member id")
@click.option("--due", "due_date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Due date (YYYY-MM-DD)")
@click.pass_obj
def add_task(app, title: str, description: Optional[str], priority: str,
             project_id: Optional[str], assignee_id: Optional[str], due_date):
    """Create a pending task for the current user."""
    with with_error_handling(app.debug):
        user = app.require_user()
        task = app.store.create_task(
            title=title,
            description=description,
            priority=priority,
            project_id=project_id,
            assignee_id=assignee_id,
            due_date=due_date,
            user_id=user.id,
        )
        click.echo(format_success(f"Created task {task.title} ({task.id})"))
        if project_id and app.store.resolve_project(project_id).is_dangling:
            click.echo(format_info(f"Project {project_id} does not exist yet"))
