"""
Repository interfaces for the domain layer.
"""

from .user_repository import UserRepository
from .project_repository import ProjectRepository, ProjectSortField, SortOrder
from .task_repository import TaskRepository

__all__ = [
    "UserRepository",
    "ProjectRepository",
    "ProjectSortField",
    "SortOrder",
    "TaskRepository",
]
