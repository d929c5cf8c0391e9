"""Unit tests for list view queries."""

from datetime import datetime, timedelta, timezone

import pytest

from freelancerpro.models import Task
from freelancerpro.services.demo_data import DEMO_USER_ID
from freelancerpro.services.queries import (
    active_project_count,
    client_projects,
    days_until_due,
    filter_items,
    is_overdue,
    matches_search,
    newest_first,
    sort_tasks,
)

NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _task(task_id, priority="medium", due=None, created=NOW, status="pending"):
    return Task(
        id=task_id,
        created_at=created,
        updated_at=created,
        user_id="u1",
        title=f"Task {task_id}",
        priority=priority,
        due_date=due,
        status=status,
    )


class TestSearch:
    def test_client_search_is_case_insensitive(self, demo_store):
        clients = demo_store.get_clients_by_user_id(DEMO_USER_ID)
        assert [c.id for c in filter_items(clients, search="COCINA")] == ["client-2"]

    def test_search_matches_email(self, demo_store):
        clients = demo_store.get_clients_by_user_id(DEMO_USER_ID)
        assert [c.id for c in filter_items(clients, search="consulting.com")] == ["client-3"]

    def test_contract_search_covers_content(self, demo_store):
        contracts = demo_store.get_contracts_by_user_id(DEMO_USER_ID)
        assert [c.id for c in filter_items(contracts, search="reservation")] == ["contract-2"]

    def test_empty_term_matches_everything(self):
        assert matches_search(_task("t1"), "")
        assert matches_search(_task("t1"), None)

    def test_no_match(self, demo_store):
        tasks = demo_store.get_tasks_by_user_id(DEMO_USER_ID)
        assert filter_items(tasks, search="zzz") == []


class TestFilters:
    def test_status_filter(self, demo_store):
        projects = demo_store.get_projects_by_user_id(DEMO_USER_ID)
        assert [p.id for p in filter_items(projects, status="active")] == ["project-1", "project-2"]

    def test_all_means_no_filter(self, demo_store):
        projects = demo_store.get_projects_by_user_id(DEMO_USER_ID)
        assert len(filter_items(projects, status="all")) == 3

    def test_priority_filter(self, demo_store):
        tasks = demo_store.get_tasks_by_user_id(DEMO_USER_ID)
        assert [t.id for t in filter_items(tasks, priority="high")] == ["task-1", "task-2"]

    def test_filters_combine(self, demo_store):
        tasks = demo_store.get_tasks_by_user_id(DEMO_USER_ID)
        result = filter_items(tasks, status="pending", priority="low")
        assert [t.id for t in result] == ["task-4"]

    def test_input_order_untouched(self, demo_store):
        tasks = demo_store.get_tasks_by_user_id(DEMO_USER_ID)
        ids = [t.id for t in tasks]
        filter_items(tasks, status="pending")
        sort_tasks(tasks)
        assert [t.id for t in tasks] == ids


class TestOrdering:
    def test_priority_then_due_date(self):
        tasks = [
            _task("low", "low", NOW + timedelta(days=1)),
            _task("high-late", "high", NOW + timedelta(days=5)),
            _task("high-soon", "high", NOW + timedelta(days=2)),
            _task("medium", "medium", NOW),
        ]
        assert [t.id for t in sort_tasks(tasks)] == ["high-soon", "high-late", "medium", "low"]

    def test_undated_after_dated_within_priority(self):
        tasks = [
            _task("undated", "high"),
            _task("dated", "high", NOW + timedelta(days=30)),
        ]
        assert [t.id for t in sort_tasks(tasks)] == ["dated", "undated"]

    def test_newest_first(self):
        items = [_task("old", created=NOW - timedelta(days=2)), _task("new", created=NOW)]
        assert [t.id for t in newest_first(items)] == ["new", "old"]


class TestDueDates:
    def test_overdue(self):
        assert is_overdue(_task("t", due=NOW - timedelta(hours=1)), now=NOW)
        assert not is_overdue(_task("t", due=NOW + timedelta(hours=1)), now=NOW)
        assert not is_overdue(_task("t"), now=NOW)

    @pytest.mark.parametrize(
        "offset,expected",
        [
            (timedelta(hours=1), 1),
            (timedelta(days=2), 2),
            (timedelta(days=2, hours=1), 3),
            (-timedelta(days=1), -1),
        ],
    )
    def test_days_until_due(self, offset, expected):
        assert days_until_due(_task("t", due=NOW + offset), now=NOW) == expected

    def test_days_until_due_without_date(self):
        assert days_until_due(_task("t"), now=NOW) is None


class TestClientProjects:
    def test_client_projects(self, demo_store):
        clients = {c.id: c for c in demo_store.get_clients_by_user_id(DEMO_USER_ID)}
        projects = demo_store.get_projects_by_user_id(DEMO_USER_ID)
        assert [p.id for p in client_projects(clients["client-1"], projects)] == [
            "project-1",
            "project-3",
        ]
        assert active_project_count(clients["client-1"], projects) == 1
        assert active_project_count(clients["client-3"], projects) == 0
