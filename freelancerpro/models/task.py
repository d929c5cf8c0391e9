"""Task models used by the task list and the Kanban board."""

from enum import Enum
from typing import ClassVar, Optional, Type

from freelancerpro.models.base import (
    EntityUpdate,
    NonBlankStr,
    OptionalText,
    OwnedEntity,
    Timestamp,
)
from freelancerpro.models.identifiers import ProjectId, TeamMemberId


class TaskStatus(str, Enum):
    """Kanban column of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskPriority(str, Enum):
    """Task priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Sort weight, higher is more important."""
        return {"low": 1, "medium": 2, "high": 3}[self.value]


class Task(OwnedEntity):
    """A unit of work, optionally attached to a project and a team member."""

    title: NonBlankStr
    description: OptionalText = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[Timestamp] = None
    project_id: Optional[ProjectId] = None
    assignee_id: Optional[TeamMemberId] = None


class TaskUpdate(EntityUpdate):
    """Fields of a task that may be changed after creation."""

    entity_model: ClassVar[Type[Task]] = Task

    title: Optional[NonBlankStr] = None
    description: OptionalText = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[Timestamp] = None
    project_id: Optional[ProjectId] = None
    assignee_id: Optional[TeamMemberId] = None
