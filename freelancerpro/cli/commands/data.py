"""Data commands: seed demo data, list and edit records."""

from typing import Dict, List, Optional

import click

from freelancerpro.cli.error_handlers import RecordNotFoundError, with_error_handling
from freelancerpro.cli.utils.formatters import (
    format_date,
    format_info,
    format_money,
    format_success,
    format_table,
)
from freelancerpro.models import ClientStatus, Reference, TaskStatus
from freelancerpro.services.demo_data import DEMO_EMAIL, DEMO_PASSWORD, build_demo_data
from freelancerpro.services.passwords import hash_password
from freelancerpro.services.queries import (
    active_project_count,
    filter_items,
    is_overdue,
    newest_first,
    sort_tasks,
)

ENTITY_CHOICES = ["clients", "projects", "tasks", "quotes", "contracts", "team"]


@click.command(name="seed-demo")
@click.option("--yes", is_flag=True, help="Replace existing data without asking")
@click.pass_obj
def seed_demo(app, yes: bool):
    """Replace stored data with the demo dataset and log in as the demo user."""
    with with_error_handling(app.debug):
        if app.store.has_data() and not yes:
            click.confirm("Existing data will be replaced. Continue?", abort=True)

        password_hash = hash_password(DEMO_PASSWORD, method=app.config.password_hash_method)
        demo = app.store.load_demo_data(build_demo_data(password_hash))
        click.echo(
            format_success(
                f"Loaded demo data: {len(demo.clients)} clients, "
                f"{len(demo.projects)} projects, {len(demo.tasks)} tasks"
            )
        )
        click.echo(format_info(f"Stored in {app.config.data_file_path()}"))
        click.echo(format_info(f"Demo login: {DEMO_EMAIL} / {DEMO_PASSWORD}"))


def _label(lookup: Dict[str, object], target_id: Optional[str], kind: str) -> str:
    return Reference(target_id=target_id, entity=lookup.get(target_id), kind=kind).label()


def _client_rows(app, user_id: str, items) -> List[List[str]]:
    projects = app.store.get_projects_by_user_id(user_id)
    return [
        [c.id, c.name, c.email, c.company or "-", c.status.value,
         str(active_project_count(c, projects))]
        for c in items
    ]


def _project_rows(app, user_id: str, items) -> List[List[str]]:
    clients = {c.id: c for c in app.store.get_clients_by_user_id(user_id)}
    return [
        [p.id, p.name, _label(clients, p.client_id, "client"), p.status.value,
         f"{p.progress}%", format_money(p.budget), format_date(p.end_date)]
        for p in items
    ]


def _task_rows(app, user_id: str, items) -> List[List[str]]:
    projects = {p.id: p for p in app.store.get_projects_by_user_id(user_id)}
    members = {m.id: m for m in app.store.get_team_members_by_user_id(user_id)}
    rows = []
    for t in sort_tasks(items):
        due = format_date(t.due_date)
        if t.status != TaskStatus.COMPLETED and is_overdue(t):
            due += " (overdue)"
        rows.append(
            [t.id, t.title, _label(projects, t.project_id, "project"),
             _label(members, t.assignee_id, "assignee"), t.status.value,
             t.priority.value, due]
        )
    return rows


def _quote_rows(app, user_id: str, items) -> List[List[str]]:
    clients = {c.id: c for c in app.store.get_clients_by_user_id(user_id)}
    return [
        [q.id, q.title, _label(clients, q.client_id, "client"), format_money(q.amount),
         q.status.value, format_date(q.valid_until)]
        for q in newest_first(items)
    ]


def _contract_rows(app, user_id: str, items) -> List[List[str]]:
    clients = {c.id: c for c in app.store.get_clients_by_user_id(user_id)}
    return [
        [k.id, k.title, _label(clients, k.client_id, "client"), k.status.value,
         format_date(k.signed_date)]
        for k in newest_first(items)
    ]


def _team_rows(app, user_id: str, items) -> List[List[str]]:
    return [[m.id, m.name, m.email, m.role, m.status.value] for m in items]


# entity -> (loader name, headers, row builder)
_LISTINGS = {
    "clients": ("get_clients_by_user_id",
                ["ID", "Name", "Email", "Company", "Status", "Active Projects"], _client_rows),
    "projects": ("get_projects_by_user_id",
                 ["ID", "Name", "Client", "Status", "Progress", "Budget", "Ends"], _project_rows),
    "tasks": ("get_tasks_by_user_id",
              ["ID", "Title", "Project", "Assignee", "Status", "Priority", "Due"], _task_rows),
    "quotes": ("get_quotes_by_user_id",
               ["ID", "Title", "Client", "Amount", "Status", "Valid Until"], _quote_rows),
    "contracts": ("get_contracts_by_user_id",
                  ["ID", "Title", "Client", "Status", "Signed"], _contract_rows),
    "team": ("get_team_members_by_user_id",
             ["ID", "Name", "Email", "Role", "Status"], _team_rows),
}


@click.command(name="list")
@click.argument("entity", type=click.Choice(ENTITY_CHOICES, case_sensitive=False))
@click.option("--search", default=None, help="Case-insensitive text search")
@click.option("--status", default=None, help="Only records with this status")
@click.option(
    "--priority",
    type=click.Choice(["low", "medium", "high"], case_sensitive=False),
    default=None,
    help="Only tasks with this priority",
)
@click.pass_obj
def list_records(app, entity: str, search: Optional[str], status: Optional[str],
                 priority: Optional[str]):
    """List the current user's records.

    Example:
        freelancerpro list clients --status active
        freelancerpro list tasks --priority high --search auth
    """
    with with_error_handling(app.debug):
        user = app.require_user()
        loader, headers, build_rows = _LISTINGS[entity.lower()]

        items = getattr(app.store, loader)(user.id)
        items = filter_items(
            items, search=search, status=status,
            priority=priority if entity.lower() == "tasks" else None,
        )

        if not items:
            click.echo(format_info(f"No {entity} found."))
            return

        click.echo(format_table(headers, build_rows(app, user.id, items)))
        click.echo()
        click.echo(format_success(f"Found {len(items)} {entity}"))


@click.command(name="add-client")
@click.option("--name", required=True, help="Client name")
@click.option("--email", required=True, help="Client email")
@click.option("--company", default=None, help="Company name")
@click.option("--phone", default=None, help="Phone number")
@click.option(
    "--status",
    type=click.Choice([s.value for s in ClientStatus]),
    default=ClientStatus.PROSPECT.value,
    show_default=True,
)
@click.option("--notes", default=None, help="Free-text notes")
@click.pass_obj
def add_client(app, name, email, company, phone, status, notes):
    """Create a client for the current user."""
    with with_error_handling(app.debug):
        user = app.require_user()
        client = app.store.create_client(
            name=name, email=email, company=company, phone=phone,
            status=status, notes=notes, user_id=user.id,
        )
        click.echo(format_success(f"Created client {client.name} ({client.id})"))


@click.command(name="delete-client")
@click.argument("client_id")
@click.pass_obj
def delete_client(app, client_id: str):
    """Delete a client. Records pointing at it keep the dangling id."""
    with with_error_handling(app.debug):
        user = app.require_user()
        own_ids = {c.id for c in app.store.get_clients_by_user_id(user.id)}
        if client_id not in own_ids or not app.store.delete_client(client_id):
            raise RecordNotFoundError(f"No client with id {client_id}")
        click.echo(format_success(f"Deleted client {client_id}"))
