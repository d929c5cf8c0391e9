"""Contract models."""

from enum import Enum
from typing import ClassVar, Optional, Type

from freelancerpro.models.base import EntityUpdate, NonBlankStr, OwnedEntity, Timestamp
from freelancerpro.models.identifiers import ProjectId


class ContractStatus(str, Enum):
    """Signature stage of a contract."""

    DRAFT = "draft"
    SENT = "sent"
    SIGNED = "signed"
    EXPIRED = "expired"


class Contract(OwnedEntity):
    """An agreement with a client; ``content`` is the full contract text."""

    title: NonBlankStr
    content: str
    status: ContractStatus = ContractStatus.DRAFT
    signed_date: Optional[Timestamp] = None
    client_id: NonBlankStr
    project_id: Optional[ProjectId] = None


class ContractUpdate(EntityUpdate):
    """Fields of a contract that may be changed after creation."""

    entity_model: ClassVar[Type[Contract]] = Contract

    title: Optional[NonBlankStr] = None
    content: Optional[str] = None
    status: Optional[ContractStatus] = None
    signed_date: Optional[Timestamp] = None
    client_id: Optional[NonBlankStr] = None
    project_id: Optional[ProjectId] = None
