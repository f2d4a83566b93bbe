"""
Project use cases for the application layer.
Every operation is scoped to the requesting principal.
"""

import logging

from devbase.application.dto.project_dto import (
    CreateProjectRequestDTO,
    DeleteProjectResponseDTO,
    ListProjectsQueryDTO,
    ProjectEnvelopeDTO,
    ProjectListResponseDTO,
    ProjectResponseDTO,
    UpdateProjectRequestDTO,
)
from devbase.application.use_cases.base_use_case import AuthorizedUseCase, RequestContext
from devbase.domain.models.base import EntityNotFoundError
from devbase.domain.models.project import Project
from devbase.domain.repositories.project_repository import ProjectRepository
from devbase.domain.services.ownership_service import OwnershipService

logger = logging.getLogger(__name__)


def _envelope(project: Project) -> ProjectEnvelopeDTO:
    return ProjectEnvelopeDTO(project=ProjectResponseDTO.from_domain(project))


class CreateProjectUseCase(AuthorizedUseCase[CreateProjectRequestDTO, ProjectEnvelopeDTO]):
    """Use case for creating a new project."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    async def _execute_business_logic(self, context: RequestContext[CreateProjectRequestDTO]) -> ProjectEnvelopeDTO:
        principal = self.principal_of(context)

        project = Project(name=context.body.name, owner_id=principal.id)
        project = await self.project_repository.add(project)

        logger.info("Project %s created by user %s", project.id, principal.id)
        return _envelope(project)


class ListProjectsUseCase(AuthorizedUseCase[None, ProjectListResponseDTO]):
    """Paginated, searchable, sortable listing of the principal's projects."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    async def _execute_business_logic(self, context: RequestContext[None]) -> ProjectListResponseDTO:
        principal = self.principal_of(context)
        query: ListProjectsQueryDTO = context.query or ListProjectsQueryDTO()

        search = query.search.strip() if query.search else None
        search = search or None

        projects = await self.project_repository.list_owned(
            principal.id,
            search=search,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
            offset=query.offset,
            limit=query.limit,
        )
        total = await self.project_repository.count_owned(principal.id, search=search)

        return ProjectListResponseDTO.create(
            items=[ProjectResponseDTO.from_domain(p) for p in projects],
            total=total,
            page=query.page,
            page_size=query.page_size,
        )


class GetProjectUseCase(AuthorizedUseCase[None, ProjectEnvelopeDTO]):
    """Use case for getting a project by ID."""

    def __init__(self, ownership_service: OwnershipService):
        self.ownership_service = ownership_service

    async def _execute_business_logic(self, context: RequestContext[None]) -> ProjectEnvelopeDTO:
        project = await self.ownership_service.require_project(
            context.params["project_id"], self.principal_of(context)
        )
        return _envelope(project)


class UpdateProjectUseCase(AuthorizedUseCase[UpdateProjectRequestDTO, ProjectEnvelopeDTO]):
    """Use case for updating project information."""

    def __init__(self, project_repository: ProjectRepository, ownership_service: OwnershipService):
        self.project_repository = project_repository
        self.ownership_service = ownership_service

    async def _execute_business_logic(self, context: RequestContext[UpdateProjectRequestDTO]) -> ProjectEnvelopeDTO:
        principal = self.principal_of(context)
        project = await self.ownership_service.require_project(context.params["project_id"], principal)

        if context.body.name is not None:
            project.rename(context.body.name)

        saved = await self.project_repository.save(project)
        if saved is None:
            # Deleted between the lookup and the write
            raise EntityNotFoundError("Project")

        logger.info("Project %s updated by user %s", saved.id, principal.id)
        return _envelope(saved)


class DeleteProjectUseCase(AuthorizedUseCase[None, DeleteProjectResponseDTO]):
    """Delete a project and, by cascade, its tasks."""

    def __init__(self, project_repository: ProjectRepository, ownership_service: OwnershipService):
        self.project_repository = project_repository
        self.ownership_service = ownership_service

    async def _execute_business_logic(self, context: RequestContext[None]) -> DeleteProjectResponseDTO:
        principal = self.principal_of(context)
        project = await self.ownership_service.require_project(context.params["project_id"], principal)

        if not await self.project_repository.delete_owned(project.id, principal.id):
            raise EntityNotFoundError("Project")

        logger.info("Project %s deleted by user %s", project.id, principal.id)
        return DeleteProjectResponseDTO()
