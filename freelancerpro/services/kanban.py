"""
Kanban board over task status.

Dropping a card on a column sets the task's status to that column. By
default any status may move to any other status; the strict policy limits
moves to ``STRICT_TRANSITIONS``.
"""

import logging
from collections import OrderedDict
from typing import Dict, FrozenSet, List, Optional, Union

from freelancerpro.models import Task, TaskStatus, TaskUpdate
from freelancerpro.services.data_store import DataStore

logger = logging.getLogger(__name__)

COLUMN_ORDER = (
    TaskStatus.PENDING,
    TaskStatus.IN_PROGRESS,
    TaskStatus.COMPLETED,
    TaskStatus.CANCELLED,
)

STRICT_TRANSITIONS: Dict[TaskStatus, FrozenSet[TaskStatus]] = {
    TaskStatus.PENDING: frozenset(
        {TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED, TaskStatus.CANCELLED}
    ),
    TaskStatus.IN_PROGRESS: frozenset(
        {TaskStatus.PENDING, TaskStatus.COMPLETED, TaskStatus.CANCELLED}
    ),
    TaskStatus.COMPLETED: frozenset({TaskStatus.PENDING, TaskStatus.IN_PROGRESS}),
    TaskStatus.CANCELLED: frozenset({TaskStatus.PENDING}),
}


class InvalidTransitionError(Exception):
    """A status move was rejected by the strict transition policy."""

    def __init__(self, task_id: str, current: TaskStatus, requested: TaskStatus):
        self.task_id = task_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Task {task_id} cannot move from {current.value} to {requested.value}"
        )


class KanbanBoard:
    """
    Status columns for a user's tasks and the moves between them.

    Args:
        store: Data store holding the tasks
        strict: Enforce ``STRICT_TRANSITIONS`` instead of free moves
    """

    def __init__(self, store: DataStore, strict: bool = False):
        self.store = store
        self.strict = strict

    def columns(self, user_id: str) -> "OrderedDict[TaskStatus, List[Task]]":
        """Group the user's tasks by status, in board column order."""
        board: "OrderedDict[TaskStatus, List[Task]]" = OrderedDict(
            (status, []) for status in COLUMN_ORDER
        )
        for task in self.store.get_tasks_by_user_id(user_id):
            board[task.status].append(task)
        return board

    def is_allowed(self, current: TaskStatus, requested: TaskStatus) -> bool:
        """Check a move against the active policy."""
        if current == requested or not self.strict:
            return True
        return requested in STRICT_TRANSITIONS[current]

    def move_task(self, task_id: str, new_status: Union[TaskStatus, str]) -> Optional[Task]:
        """
        Drop a task onto the ``new_status`` column.

        Returns:
            The updated task, the unchanged task when it already has
            ``new_status``, or None if no task has this id

        Raises:
            ValueError: If ``new_status`` is not a task status
            InvalidTransitionError: If the strict policy forbids the move
        """
        requested = TaskStatus(new_status)
        task = self.store.get_task_by_id(task_id)
        if task is None:
            logger.info(f"Cannot move unknown task {task_id}")
            return None

        if task.status == requested:
            return task

        if not self.is_allowed(task.status, requested):
            raise InvalidTransitionError(task_id, task.status, requested)

        logger.info(f"Moving task {task_id}: {task.status.value} -> {requested.value}")
        return self.store.update_task(task_id, TaskUpdate(status=requested))

    def toggle_completion(self, task_id: str) -> Optional[Task]:
        """Mark a task completed, or reopen it as pending if it already is."""
        task = self.store.get_task_by_id(task_id)
        if task is None:
            return None
        target = (
            TaskStatus.PENDING if task.status == TaskStatus.COMPLETED else TaskStatus.COMPLETED
        )
        return self.move_task(task_id, target)
