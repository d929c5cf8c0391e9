"""Quote models."""

from enum import Enum
from typing import ClassVar, Optional, Type

from freelancerpro.models.base import (
    EntityUpdate,
    Money,
    NonBlankStr,
    OptionalText,
    OwnedEntity,
    Timestamp,
)
from freelancerpro.models.identifiers import ProjectId


class QuoteStatus(str, Enum):
    """Negotiation stage of a quote."""

    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Quote(OwnedEntity):
    """A priced offer sent to a client.

    Accepted quotes count as revenue on the dashboard.
    """

    title: NonBlankStr
    description: OptionalText = None
    amount: Money
    status: QuoteStatus = QuoteStatus.DRAFT
    valid_until: Optional[Timestamp] = None
    client_id: NonBlankStr
    project_id: Optional[ProjectId] = None


class QuoteUpdate(EntityUpdate):
    """Fields of a quote that may be changed after creation."""

    entity_model: ClassVar[Type[Quote]] = Quote

    title: Optional[NonBlankStr] = None
    description: OptionalText = None
    amount: Optional[Money] = None
    status: Optional[QuoteStatus] = None
    valid_until: Optional[Timestamp] = None
    client_id: Optional[NonBlankStr] = None
    project_id: Optional[ProjectId] = None
