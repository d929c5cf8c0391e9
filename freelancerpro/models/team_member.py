"""Team member models."""

from enum import Enum
from typing import ClassVar, Optional, Type

from freelancerpro.models.base import EmailAddress, EntityUpdate, NonBlankStr, OwnedEntity


class TeamMemberStatus(str, Enum):
    """Availability of a collaborator."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class TeamMember(OwnedEntity):
    """A collaborator tasks can be assigned to. ``role`` is free text."""

    name: NonBlankStr
    email: EmailAddress
    role: NonBlankStr
    status: TeamMemberStatus = TeamMemberStatus.ACTIVE


class TeamMemberUpdate(EntityUpdate):
    """Fields of a team member that may be changed after creation."""

    entity_model: ClassVar[Type[TeamMember]] = TeamMember

    name: Optional[NonBlankStr] = None
    email: Optional[EmailAddress] = None
    role: Optional[NonBlankStr] = None
    status: Optional[TeamMemberStatus] = None
