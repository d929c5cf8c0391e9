"""Project models.

Project status follows the planning/active/completed/cancelled lifecycle.
"""

from enum import Enum
from typing import ClassVar, Optional, Type

from freelancerpro.models.base import (
    EntityUpdate,
    Money,
    NonBlankStr,
    OptionalText,
    OwnedEntity,
    Progress,
    Timestamp,
)
from freelancerpro.models.identifiers import ClientId


class ProjectStatus(str, Enum):
    """Lifecycle stage of a project."""

    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Project(OwnedEntity):
    """A piece of work, optionally delivered for a client.

    Attributes:
        name: Project name
        description: Optional description
        status: Lifecycle stage
        start_date: Optional planned start
        end_date: Optional planned end
        budget: Optional non-negative budget
        progress: Completion percentage (0-100)
        client_id: Weak reference to a Client
    """

    name: NonBlankStr
    description: OptionalText = None
    status: ProjectStatus = ProjectStatus.PLANNING
    start_date: Optional[Timestamp] = None
    end_date: Optional[Timestamp] = None
    budget: Optional[Money] = None
    progress: Progress = 0
    client_id: Optional[ClientId] = None


class ProjectUpdate(EntityUpdate):
    """Fields of a project that may be changed after creation."""

    entity_model: ClassVar[Type[Project]] = Project

    name: Optional[NonBlankStr] = None
    description: OptionalText = None
    status: Optional[ProjectStatus] = None
    start_date: Optional[Timestamp] = None
    end_date: Optional[Timestamp] = None
    budget: Optional[Money] = None
    progress: Optional[Progress] = None
    client_id: Optional[ClientId] = None
