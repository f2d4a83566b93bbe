"""
Project repository interface.
Every lookup and mutation is keyed on the owner as well as the project ID.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from devbase.domain.models.project import Project


class ProjectSortField(str, Enum):
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    NAME = "name"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ProjectRepository(ABC):
    """Repository interface for Project aggregate."""

    @abstractmethod
    async def add(self, project: Project) -> Project:
        """Persist a new project and return it with its ID set."""
        pass

    @abstractmethod
    async def find_owned(self, project_id: str, owner_id: str) -> Optional[Project]:
        """
        Find a project by ID among those owned by ``owner_id``.
        Returns None both when the ID does not exist and when another user owns it.
        """
        pass

    @abstractmethod
    async def list_owned(
        self,
        owner_id: str,
        search: Optional[str] = None,
        sort_by: ProjectSortField = ProjectSortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
        offset: int = 0,
        limit: int = 10
    ) -> List[Project]:
        """
        List the owner's projects.
        ``search`` is a case-insensitive substring match on the name.
        """
        pass

    @abstractmethod
    async def count_owned(self, owner_id: str, search: Optional[str] = None) -> int:
        pass

    @abstractmethod
    async def save(self, project: Project) -> Optional[Project]:
        """
        Write back a project's mutable fields.
        The update is filtered on ``(id, owner_id)``; returns None if no row matched.
        """
        pass

    @abstractmethod
    async def delete_owned(self, project_id: str, owner_id: str) -> bool:
        """Delete the project if ``owner_id`` owns it. Returns whether a row was deleted."""
        pass
