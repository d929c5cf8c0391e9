"""Typed identifiers for optional weak references between entities.

All ids are plain strings at runtime; the aliases let signatures say which
collection an id points into. Required references use ``NonBlankStr``.
"""

from typing import NewType

ClientId = NewType("ClientId", str)
ProjectId = NewType("ProjectId", str)
TeamMemberId = NewType("TeamMemberId", str)
