"""Outcome of following a weak reference."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Reference(Generic[T]):
    """Result of resolving a string id against its collection.

    Attributes:
        target_id: The id that was looked up, or None when no id was set
        entity: The referenced entity when it exists
        kind: Human readable name of the referenced collection
    """

    target_id: Optional[str]
    entity: Optional[T] = None
    kind: str = "item"

    @property
    def is_set(self) -> bool:
        return self.target_id is not None

    @property
    def is_resolved(self) -> bool:
        return self.entity is not None

    @property
    def is_dangling(self) -> bool:
        """True when an id is set but nothing carries it."""
        return self.is_set and not self.is_resolved

    def label(self, attribute: str = "name") -> str:
        """Display text: the entity's name, or a placeholder."""
        if self.entity is not None:
            return str(getattr(self.entity, attribute))
        if self.target_id is None:
            return f"No {self.kind}"
        return f"Unknown {self.kind}"
