"""The aggregate document holding every entity collection."""

from typing import ClassVar, List, Tuple

from pydantic import Field

from freelancerpro.models.base import BaseDataModel
from freelancerpro.models.client import Client
from freelancerpro.models.contract import Contract
from freelancerpro.models.project import Project
from freelancerpro.models.quote import Quote
from freelancerpro.models.task import Task
from freelancerpro.models.team_member import TeamMember
from freelancerpro.models.user import User


class AppData(BaseDataModel):
    """All seven collections, persisted as one JSON document.

    Collections keep insertion order. Serialized keys are ``users``,
    ``clients``, ``projects``, ``tasks``, ``quotes``, ``contracts`` and
    ``teamMembers``.
    """

    users: List[User] = Field(default_factory=list)
    clients: List[Client] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    tasks: List[Task] = Field(default_factory=list)
    quotes: List[Quote] = Field(default_factory=list)
    contracts: List[Contract] = Field(default_factory=list)
    team_members: List[TeamMember] = Field(default_factory=list)

    COLLECTIONS: ClassVar[Tuple[str, ...]] = (
        "users",
        "clients",
        "projects",
        "tasks",
        "quotes",
        "contracts",
        "team_members",
    )

    def to_json(self) -> str:
        """Serialize the document for storage."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str) -> "AppData":
        """Parse a stored document.

        Raises:
            pydantic.ValidationError: If the text is not a valid document
        """
        return cls.model_validate_json(raw)
