"""Client models."""

from enum import Enum
from typing import ClassVar, Optional, Type

from freelancerpro.models.base import (
    EmailAddress,
    EntityUpdate,
    NonBlankStr,
    OptionalText,
    OwnedEntity,
)


class ClientStatus(str, Enum):
    """Sales stage of a client."""

    PROSPECT = "prospect"
    ACTIVE = "active"
    INACTIVE = "inactive"


class Client(OwnedEntity):
    """A customer of the freelancer.

    Attributes:
        name: Contact or company name
        email: Contact email
        phone: Optional phone number
        company: Optional company name
        status: prospect, active or inactive
        notes: Optional free-text notes

    Example:
        >>> from datetime import datetime, timezone
        >>> now = datetime(2024, 1, 15, tzinfo=timezone.utc)
        >>> client = Client(
        ...     id="client-1", name="Acme", email="a@acme.com",
        ...     status="prospect", user_id="u1", created_at=now, updated_at=now,
        ... )
        >>> client.status.value
        'prospect'
    """

    name: NonBlankStr
    email: EmailAddress
    phone: OptionalText = None
    company: OptionalText = None
    status: ClientStatus = ClientStatus.PROSPECT
    notes: OptionalText = None


class ClientUpdate(EntityUpdate):
    """Fields of a client that may be changed after creation."""

    entity_model: ClassVar[Type[Client]] = Client

    name: Optional[NonBlankStr] = None
    email: Optional[EmailAddress] = None
    phone: OptionalText = None
    company: OptionalText = None
    status: Optional[ClientStatus] = None
    notes: OptionalText = None
