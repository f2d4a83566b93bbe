"""
Task use cases for the application layer.
"""

import logging
from typing import List

from devbase.application.dto.task_dto import (
    CreateTaskRequestDTO,
    DeleteTaskResponseDTO,
    ListTasksQueryDTO,
    TaskResponseDTO,
    UpdateTaskRequestDTO,
)
from devbase.application.use_cases.base_use_case import AuthorizedUseCase, RequestContext
from devbase.domain.models.base import EntityNotFoundError
from devbase.domain.models.task import Task, TaskStatus
from devbase.domain.repositories.task_repository import TaskRepository
from devbase.domain.services.ownership_service import OwnershipService

logger = logging.getLogger(__name__)


class CreateTaskUseCase(AuthorizedUseCase[CreateTaskRequestDTO, TaskResponseDTO]):
    """
    Create a task in one of the principal's projects.
    The project check runs before anything is written.
    """

    def __init__(self, task_repository: TaskRepository, ownership_service: OwnershipService):
        self.task_repository = task_repository
        self.ownership_service = ownership_service

    async def _execute_business_logic(self, context: RequestContext[CreateTaskRequestDTO]) -> TaskResponseDTO:
        principal = self.principal_of(context)
        request = context.body

        project = await self.ownership_service.require_project(str(request.project_id), principal)

        task = Task(
            title=request.title,
            status=request.status or TaskStatus.TODO,
            project_id=project.id,
            user_id=principal.id,
        )
        task = await self.task_repository.add(task)

        logger.info("Task %s created in project %s by user %s", task.id, project.id, principal.id)
        return TaskResponseDTO.from_domain(task)


class ListTasksUseCase(AuthorizedUseCase[None, List[TaskResponseDTO]]):
    """List the principal's tasks, newest first."""

    def __init__(self, task_repository: TaskRepository):
        self.task_repository = task_repository

    async def _execute_business_logic(self, context: RequestContext[None]) -> List[TaskResponseDTO]:
        principal = self.principal_of(context)
        query: ListTasksQueryDTO = context.query or ListTasksQueryDTO()

        tasks = await self.task_repository.list_for_user(
            principal.id,
            project_id=str(query.project_id) if query.project_id else None,
            status=TaskStatus(query.status) if query.status else None,
        )
        return [TaskResponseDTO.from_domain(task) for task in tasks]


class GetTaskUseCase(AuthorizedUseCase[None, TaskResponseDTO]):
    def __init__(self, ownership_service: OwnershipService):
        self.ownership_service = ownership_service

    async def _execute_business_logic(self, context: RequestContext[None]) -> TaskResponseDTO:
        task = await self.ownership_service.require_task(context.params["task_id"], self.principal_of(context))
        return TaskResponseDTO.from_domain(task)


class UpdateTaskUseCase(AuthorizedUseCase[UpdateTaskRequestDTO, TaskResponseDTO]):
    """Partial update of title and/or status."""

    def __init__(self, task_repository: TaskRepository, ownership_service: OwnershipService):
        self.task_repository = task_repository
        self.ownership_service = ownership_service

    async def _execute_business_logic(self, context: RequestContext[UpdateTaskRequestDTO]) -> TaskResponseDTO:
        principal = self.principal_of(context)
        task = await self.ownership_service.require_task(context.params["task_id"], principal)

        task.update(title=context.body.title, status=context.body.status)

        saved = await self.task_repository.save(task)
        if saved is None:
            raise EntityNotFoundError("Task")

        logger.info("Task %s updated by user %s", saved.id, principal.id)
        return TaskResponseDTO.from_domain(saved)


class DeleteTaskUseCase(AuthorizedUseCase[None, DeleteTaskResponseDTO]):
    def __init__(self, task_repository: TaskRepository, ownership_service: OwnershipService):
        self.task_repository = task_repository
        self.ownership_service = ownership_service

    async def _execute_business_logic(self, context: RequestContext[None]) -> DeleteTaskResponseDTO:
        principal = self.principal_of(context)
        task = await self.ownership_service.require_task(context.params["task_id"], principal)

        if not await self.task_repository.delete_for_user(task.id, principal.id):
            raise EntityNotFoundError("Task")

        logger.info("Task %s deleted by user %s", task.id, principal.id)
        return DeleteTaskResponseDTO()
