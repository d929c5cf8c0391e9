"""Base models shared by every FreelancerPro entity.

The aggregate document is persisted with camelCase keys (``userId``,
``createdAt``) while Python code uses snake_case attributes. Both spellings
are accepted on input; ``to_document`` always produces the camelCase form.
"""

import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, ClassVar, Dict, Optional, Type, get_args

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _not_blank(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("cannot be empty or whitespace")
    return value.strip()


def _valid_email(value: str) -> str:
    value = value.strip()
    if not _EMAIL_PATTERN.match(value):
        raise ValueError(f"'{value}' is not a valid email address")
    return value


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _is_nullable(annotation: Any) -> bool:
    return annotation is type(None) or type(None) in get_args(annotation)


# Reusable constrained field types
NonBlankStr = Annotated[str, AfterValidator(_not_blank)]
EmailAddress = Annotated[str, AfterValidator(_valid_email)]
OptionalText = Annotated[Optional[str], AfterValidator(_blank_to_none)]
Timestamp = Annotated[datetime, AfterValidator(_as_utc)]
Progress = Annotated[int, Field(ge=0, le=100)]
# Serialized as a decimal string so amounts survive a save and reload exactly
Money = Annotated[Decimal, Field(ge=0)]


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides:
    - camelCase aliases for the persisted document shape
    - validation on assignment
    - rejection of unknown fields

    Example:
        >>> class Note(BaseDataModel):
        ...     user_id: str
        >>> Note(userId="u1").user_id
        'u1'
        >>> Note(user_id="u1").to_document()
        {'userId': 'u1'}
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
        frozen=False,
    )

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the JSON-compatible camelCase document shape."""
        return self.model_dump(mode="json", by_alias=True)


class Entity(BaseDataModel):
    """A persisted business record with identity and timestamps.

    Attributes:
        id: Unique identifier within the entity's collection
        created_at: Creation timestamp
        updated_at: Last modification timestamp
    """

    id: NonBlankStr
    created_at: Timestamp
    updated_at: Timestamp


class OwnedEntity(Entity):
    """An entity scoped to the user who owns it."""

    user_id: NonBlankStr


class EntityUpdate(BaseDataModel):
    """Base class for partial updates.

    Only fields explicitly set by the caller are merged over the stored
    record; see ``changes``. An explicit ``None`` is accepted only for fields
    the target ``entity_model`` declares optional.
    """

    entity_model: ClassVar[Optional[Type[BaseModel]]] = None

    @model_validator(mode="after")
    def _reject_null_required(self) -> "EntityUpdate":
        if self.entity_model is None:
            return self
        entity_fields = self.entity_model.model_fields
        for name in sorted(self.model_fields_set):
            if getattr(self, name) is not None or name not in entity_fields:
                continue
            if not _is_nullable(entity_fields[name].annotation):
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Return the explicitly provided fields keyed by attribute name."""
        return self.model_dump(exclude_unset=True)
