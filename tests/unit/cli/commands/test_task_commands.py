"""Unit tests for board, move-task, toggle-task and add-task."""

import json

import pytest
from click.testing import CliRunner

from freelancerpro.cli import cli


@pytest.fixture
def seeded(mock_env, tmp_path):
    runner = CliRunner()

    def _invoke(*args, **kwargs):
        return runner.invoke(cli, ["--data-dir", str(tmp_path / "data"), *args], **kwargs)

    assert _invoke("seed-demo", "--yes").exit_code == 0
    return _invoke


class TestBoard:
    def test_columns(self, seeded):
        output = seeded("board").output
        assert "PENDING (2)" in output
        assert "IN_PROGRESS (1)" in output
        assert "COMPLETED (1)" in output
        assert "CANCELLED (0)" in output
        assert "(empty)" in output

    def test_requires_login(self, seeded):
        seeded("logout")
        assert seeded("board").exit_code == 1


class TestMoveTask:
    """Test suite for move-task."""

    def test_move(self, seeded):
        result = seeded("move-task", "task-3", "in_progress")
        assert result.exit_code == 0
        assert "Task task-3 is now in_progress" in result.output
        assert "IN_PROGRESS (2)" in seeded("board").output

    def test_unknown_task(self, seeded):
        result = seeded("move-task", "task-99", "completed")
        assert result.exit_code == 2
        assert "No task with id task-99" in result.output

    def test_invalid_status(self, seeded):
        assert seeded("move-task", "task-3", "archived").exit_code == 2

    def test_strict_transitions(self, seeded, monkeypatch):
        import freelancerpro.config.settings

        monkeypatch.setenv("KANBAN_STRICT_TRANSITIONS", "true")
        freelancerpro.config.settings._config = None

        result = seeded("move-task", "task-1", "cancelled")
        assert result.exit_code == 4
        assert "cannot move from completed to cancelled" in result.output


class TestToggleTask:
    def test_toggle(self, seeded):
        assert "is now completed" in seeded("toggle-task", "task-4").output
        assert "is now pending" in seeded("toggle-task", "task-4").output

    def test_unknown_task(self, seeded):
        assert seeded("toggle-task", "nope").exit_code == 2


class TestAddTask:
    def test_add_task(self, seeded):
        result = seeded(
            "add-task", "--title", "Write tests", "--priority", "high",
            "--project", "project-1", "--due", "2024-03-01",
        )
        assert result.exit_code == 0
        assert "Created task Write tests" in result.output

        output = seeded("list", "tasks", "--search", "write tests").output
        assert "FinTech Mobile App" in output
        assert "2024-03-01" in output

    def test_add_task_unknown_project(self, seeded):
        result = seeded("add-task", "--title", "Orphan", "--project", "project-99")
        assert result.exit_code == 0
        assert "Project project-99 does not exist yet" in result.output

    def test_add_task_blank_title(self, seeded):
        result = seeded("add-task", "--title", "   ")
        assert result.exit_code == 3


class TestOtherUsersTasks:
    """Tasks owned by another user are reported as missing."""

    @pytest.fixture
    def second_user(self, seeded):
        seeded("logout")
        result = seeded(
            "register", "--email", "ana@example.com", "--name", "Ana", "--password", "s3cret"
        )
        assert result.exit_code == 0
        return seeded

    def _task_3(self, tmp_path):
        document = json.loads((tmp_path / "data" / "freelancer_app_data.json").read_text())
        return next(t for t in document["tasks"] if t["id"] == "task-3")

    def test_move_other_users_task(self, second_user, tmp_path):
        before = self._task_3(tmp_path)
        result = second_user("move-task", "task-3", "cancelled")
        assert result.exit_code == 2
        assert "No task with id task-3" in result.output
        assert self._task_3(tmp_path) == before

    def test_toggle_other_users_task(self, second_user, tmp_path):
        before = self._task_3(tmp_path)
        assert second_user("toggle-task", "task-3").exit_code == 2
        assert self._task_3(tmp_path) == before
