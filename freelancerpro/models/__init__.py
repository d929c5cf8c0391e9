"""Data models for FreelancerPro.

This package contains Pydantic models for all business entities and the
aggregate document that persists them:
- User, Client, Project, Task, Quote, Contract, TeamMember
- <Entity>Update: partial updates validated before merge
- AppData: the aggregate document
- Reference: outcome of resolving a weak string-id reference
"""

from freelancerpro.models.app_data import AppData
from freelancerpro.models.base import BaseDataModel, Entity, EntityUpdate, OwnedEntity
from freelancerpro.models.client import Client, ClientStatus, ClientUpdate
from freelancerpro.models.contract import Contract, ContractStatus, ContractUpdate
from freelancerpro.models.identifiers import ClientId, ProjectId, TeamMemberId
from freelancerpro.models.project import Project, ProjectStatus, ProjectUpdate
from freelancerpro.models.quote import Quote, QuoteStatus, QuoteUpdate
from freelancerpro.models.reference import Reference
from freelancerpro.models.task import Task, TaskPriority, TaskStatus, TaskUpdate
from freelancerpro.models.team_member import (
    TeamMember,
    TeamMemberStatus,
    TeamMemberUpdate,
)
from freelancerpro.models.user import User, UserRole

__all__ = [
    "AppData",
    "BaseDataModel",
    "Entity",
    "EntityUpdate",
    "OwnedEntity",
    "Reference",
    "User",
    "UserRole",
    "Client",
    "ClientStatus",
    "ClientUpdate",
    "ClientId",
    "Project",
    "ProjectStatus",
    "ProjectUpdate",
    "ProjectId",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "TaskUpdate",
    "Quote",
    "QuoteStatus",
    "QuoteUpdate",
    "Contract",
    "ContractStatus",
    "ContractUpdate",
    "TeamMember",
    "TeamMemberStatus",
    "TeamMemberUpdate",
    "TeamMemberId",
]
