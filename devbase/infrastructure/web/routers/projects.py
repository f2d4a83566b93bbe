"""
Project management router.
Every route requires a bearer token and only sees the caller's projects.
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from devbase.application.dto.project_dto import (
    CreateProjectRequestDTO,
    DeleteProjectResponseDTO,
    ListProjectsQueryDTO,
    ProjectEnvelopeDTO,
    ProjectListResponseDTO,
    SearchTerm,
    UpdateProjectRequestDTO,
)
from devbase.application.use_cases.base_use_case import RequestContext
from devbase.application.use_cases.project_use_cases import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)
from devbase.domain.repositories.project_repository import ProjectSortField, SortOrder
from devbase.infrastructure.web.dependencies import (
    get_create_project_use_case,
    get_delete_project_use_case,
    get_get_project_use_case,
    get_list_projects_use_case,
    get_update_project_use_case,
)
from devbase.infrastructure.web.middleware.auth_middleware import CurrentPrincipal, require_auth
from devbase.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter(dependencies=[Depends(require_auth)])

ProjectId = Annotated[UUID, Path(description="Project ID")]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectEnvelopeDTO)
async def create_project(
    body: CreateProjectRequestDTO,
    principal: CurrentPrincipal,
    use_case: Annotated[CreateProjectUseCase, Depends(get_create_project_use_case)]
):
    """
    Create a new project.

    - **name**: Project name, 2 to 80 characters after trimming
    """
    return unwrap_result(await use_case.execute(RequestContext(principal=principal, body=body)))


@router.get("", response_model=ProjectListResponseDTO)
async def list_projects(
    principal: CurrentPrincipal,
    use_case: Annotated[ListProjectsUseCase, Depends(get_list_projects_use_case)],
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(10, ge=1, le=50, alias="pageSize", description="Items per page"),
    search: Optional[SearchTerm] = Query(None, description="Filter by name, 1 to 80 characters after trimming"),
    sort_by: ProjectSortField = Query(ProjectSortField.CREATED_AT, alias="sortBy"),
    sort_order: SortOrder = Query(SortOrder.DESC, alias="sortOrder")
):
    """List the caller's projects with pagination, search and sorting."""
    query = ListProjectsQueryDTO(
        page=page,
        page_size=page_size,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return unwrap_result(await use_case.execute(RequestContext(principal=principal, query=query)))


@router.get("/{project_id}", response_model=ProjectEnvelopeDTO)
async def get_project(
    project_id: ProjectId,
    principal: CurrentPrincipal,
    use_case: Annotated[GetProjectUseCase, Depends(get_get_project_use_case)]
):
    """Get a project by ID. Projects of other users are reported as not found."""
    context = RequestContext(principal=principal, params={"project_id": str(project_id)})
    return unwrap_result(await use_case.execute(context))


@router.patch("/{project_id}", response_model=ProjectEnvelopeDTO)
async def update_project(
    project_id: ProjectId,
    body: UpdateProjectRequestDTO,
    principal: CurrentPrincipal,
    use_case: Annotated[UpdateProjectUseCase, Depends(get_update_project_use_case)]
):
    """Rename a project."""
    context = RequestContext(principal=principal, body=body, params={"project_id": str(project_id)})
    return unwrap_result(await use_case.execute(context))


@router.delete("/{project_id}", response_model=DeleteProjectResponseDTO)
async def delete_project(
    project_id: ProjectId,
    principal: CurrentPrincipal,
    use_case: Annotated[DeleteProjectUseCase, Depends(get_delete_project_use_case)]
):
    """Delete a project together with its tasks."""
    context = RequestContext(principal=principal, params={"project_id": str(project_id)})
    return unwrap_result(await use_case.execute(context))
