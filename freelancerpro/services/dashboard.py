"""Dashboard summary: headline counts, revenue and the short lists."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from freelancerpro.models import (
    ClientStatus,
    Project,
    ProjectStatus,
    QuoteStatus,
    Task,
    TaskStatus,
)
from freelancerpro.services.data_store import DataStore

RECENT_LIMIT = 5


@dataclass
class DashboardSummary:
    """Aggregates shown on a user's dashboard.

    Attributes:
        active_projects: Projects with status active
        total_projects: All of the user's projects
        active_clients: Clients with status active
        total_clients: All of the user's clients
        pending_tasks: Tasks with status pending
        total_tasks: All of the user's tasks
        revenue: Sum of accepted quote amounts
        recent_projects: Most recently updated projects
        urgent_tasks: Open tasks with the nearest due dates
    """

    active_projects: int = 0
    total_projects: int = 0
    active_clients: int = 0
    total_clients: int = 0
    pending_tasks: int = 0
    total_tasks: int = 0
    revenue: Decimal = Decimal("0")
    recent_projects: List[Project] = field(default_factory=list)
    urgent_tasks: List[Task] = field(default_factory=list)


def build_dashboard(store: DataStore, user_id: str, limit: int = RECENT_LIMIT) -> DashboardSummary:
    """
    Compute the dashboard for ``user_id``.

    Args:
        store: Data store to read from
        user_id: Owner of the entities
        limit: Length of the recent project and urgent task lists

    Returns:
        DashboardSummary
    """
    projects = store.get_projects_by_user_id(user_id)
    clients = store.get_clients_by_user_id(user_id)
    tasks = store.get_tasks_by_user_id(user_id)
    quotes = store.get_quotes_by_user_id(user_id)

    revenue = sum(
        (q.amount for q in quotes if q.status == QuoteStatus.ACCEPTED), Decimal("0")
    )

    recent_projects = sorted(projects, key=lambda p: p.updated_at, reverse=True)[:limit]

    urgent_tasks = sorted(
        (t for t in tasks if t.status != TaskStatus.COMPLETED and t.due_date is not None),
        key=lambda t: t.due_date,
    )[:limit]

    return DashboardSummary(
        active_projects=sum(1 for p in projects if p.status == ProjectStatus.ACTIVE),
        total_projects=len(projects),
        active_clients=sum(1 for c in clients if c.status == ClientStatus.ACTIVE),
        total_clients=len(clients),
        pending_tasks=sum(1 for t in tasks if t.status == TaskStatus.PENDING),
        total_tasks=len(tasks),
        revenue=revenue,
        recent_projects=recent_projects,
        urgent_tasks=urgent_tasks,
    )
