"""User account model."""

from enum import Enum

from freelancerpro.models.base import EmailAddress, Entity, NonBlankStr


class UserRole(str, Enum):
    """Account roles."""

    FREELANCER = "freelancer"
    ADMIN = "admin"


class User(Entity):
    """A registered account.

    ``password`` holds a salted hash, or an empty string on copies handed
    out to callers and on the current-user marker.
    """

    email: EmailAddress
    name: NonBlankStr
    password: str = ""
    role: UserRole = UserRole.FREELANCER

    def without_password(self) -> "User":
        """Return a copy safe to expose or persist as the session marker."""
        return self.model_copy(update={"password": ""})
