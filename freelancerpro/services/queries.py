"""List view queries: search, status filters, ordering and due dates.

All functions are pure: they take already loaded entities and return new
lists, leaving storage order untouched.
"""

import math
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence, TypeVar

from freelancerpro.models import (
    Client,
    Contract,
    Project,
    ProjectStatus,
    Quote,
    Task,
    TeamMember,
)

T = TypeVar("T")

# Attributes searched per entity type
SEARCH_FIELDS = {
    Client: ("name", "email", "company"),
    Project: ("name", "description"),
    Task: ("title", "description"),
    Quote: ("title", "description"),
    Contract: ("title", "content"),
    TeamMember: ("name", "email", "role"),
}

SECONDS_PER_DAY = 24 * 60 * 60


def matches_search(item, term: Optional[str]) -> bool:
    """Case-insensitive substring match over the item's searchable fields."""
    if not term:
        return True
    needle = term.lower()
    for field in SEARCH_FIELDS.get(type(item), ()):
        value = getattr(item, field, None)
        if value and needle in str(value).lower():
            return True
    return False


def _value(enum_or_str) -> str:
    return getattr(enum_or_str, "value", enum_or_str)


def filter_items(
    items: Iterable[T],
    search: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
) -> List[T]:
    """
    Apply the list-view filters.

    Args:
        items: Entities to filter
        search: Free-text search term
        status: Status value to keep, or None / "all" for every status
        priority: Task priority to keep, or None / "all"

    Returns:
        Matching items in their original order
    """
    result = [item for item in items if matches_search(item, search)]
    if status and status != "all":
        result = [item for item in result if _value(item.status) == _value(status)]
    if priority and priority != "all":
        result = [item for item in result if _value(item.priority) == _value(priority)]
    return result


def _task_sort_key(task: Task):
    return -task.priority.rank


def sort_tasks(tasks: Sequence[Task]) -> List[Task]:
    """
    Order tasks by priority (high first), then due date ascending.

    Tasks without a due date come after dated tasks of the same priority,
    newest first.
    """
    dated = [t for t in tasks if t.due_date is not None]
    undated = [t for t in tasks if t.due_date is None]
    dated.sort(key=lambda t: t.due_date)
    undated.sort(key=lambda t: t.created_at, reverse=True)
    # Stable sort keeps the date ordering inside each priority
    return sorted(dated + undated, key=_task_sort_key)


def newest_first(items: Sequence[T]) -> List[T]:
    """Order quotes, contracts or any entity by creation time, newest first."""
    return sorted(items, key=lambda item: item.created_at, reverse=True)


def is_overdue(task: Task, now: Optional[datetime] = None) -> bool:
    """True when the task has a due date in the past."""
    if task.due_date is None:
        return False
    now = now or datetime.now(timezone.utc)
    return task.due_date < now


def days_until_due(task: Task, now: Optional[datetime] = None) -> Optional[int]:
    """Whole days until the due date, rounded up; negative when overdue."""
    if task.due_date is None:
        return None
    now = now or datetime.now(timezone.utc)
    return math.ceil((task.due_date - now).total_seconds() / SECONDS_PER_DAY)


def client_projects(client: Client, projects: Iterable[Project]) -> List[Project]:
    """Projects whose clientId points at ``client``."""
    return [p for p in projects if p.client_id == client.id]


def active_project_count(client: Client, projects: Iterable[Project]) -> int:
    """Number of the client's projects currently active."""
    return sum(1 for p in client_projects(client, projects) if p.status == ProjectStatus.ACTIVE)
