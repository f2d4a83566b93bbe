"""
Ownership authorization for projects and tasks.

Lookups are always filtered by the requesting principal, so "does not exist"
and "belongs to someone else" are the same outcome: EntityNotFoundError.
Callers must never turn that into a 403, which would confirm the resource
exists.
"""

import logging

from devbase.domain.models.base import EntityNotFoundError
from devbase.domain.models.principal import Principal
from devbase.domain.models.project import Project
from devbase.domain.models.task import Task
from devbase.domain.repositories.project_repository import ProjectRepository
from devbase.domain.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class OwnershipService:
    """Resolves resources on behalf of a principal."""

    def __init__(self, project_repository: ProjectRepository, task_repository: TaskRepository):
        self.project_repository = project_repository
        self.task_repository = task_repository

    async def require_project(self, project_id: str, principal: Principal) -> Project:
        """
        Return the project if the principal owns it.

        Raises:
            EntityNotFoundError: If no project with this ID is owned by the principal
        """
        project = await self.project_repository.find_owned(project_id, principal.id)
        if project is None:
            logger.debug("Project %s not visible to user %s", project_id, principal.id)
            raise EntityNotFoundError("Project")
        return project

    async def require_task(self, task_id: str, principal: Principal) -> Task:
        """
        Return the task if the principal created it.

        Raises:
            EntityNotFoundError: If no task with this ID belongs to the principal
        """
        task = await self.task_repository.find_for_user(task_id, principal.id)
        if task is None:
            logger.debug("Task %s not visible to user %s", task_id, principal.id)
            raise EntityNotFoundError("Task")
        return task
