"""
Services for the FreelancerPro data layer.

This package provides:
- DataStore: CRUD over the aggregate document
- AuthService: local registration, login and current-user tracking
- KanbanBoard: task status columns and moves
- build_dashboard: headline numbers for a user
- build_demo_data: bundled demo dataset
"""

from .auth import AuthResult, AuthService
from .dashboard import DashboardSummary, build_dashboard
from .data_store import DataStore, generate_id
from .demo_data import build_demo_data
from .kanban import InvalidTransitionError, KanbanBoard

__all__ = [
    "DataStore",
    "generate_id",
    "AuthService",
    "AuthResult",
    "KanbanBoard",
    "InvalidTransitionError",
    "DashboardSummary",
    "build_dashboard",
    "build_demo_data",
]
