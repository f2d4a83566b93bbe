"""
Task repository interface.
Tasks are looked up by their own ``user_id``, not through project ownership.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from devbase.domain.models.task import Task, TaskStatus


class TaskRepository(ABC):
    """Repository interface for Task entities."""

    @abstractmethod
    async def add(self, task: Task) -> Task:
        pass

    @abstractmethod
    async def find_for_user(self, task_id: str, user_id: str) -> Optional[Task]:
        """Find a task by ID among those created by ``user_id``."""
        pass

    @abstractmethod
    async def list_for_user(
        self,
        user_id: str,
        project_id: Optional[str] = None,
        status: Optional[TaskStatus] = None
    ) -> List[Task]:
        """List the user's tasks, newest first, with optional filters."""
        pass

    @abstractmethod
    async def save(self, task: Task) -> Optional[Task]:
        """Write back a task; filtered on ``(id, user_id)``. Returns None if no row matched."""
        pass

    @abstractmethod
    async def delete_for_user(self, task_id: str, user_id: str) -> bool:
        pass
