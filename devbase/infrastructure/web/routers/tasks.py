"""
Task management router.
Every route requires a bearer token and only sees the caller's tasks.
"""

from typing import Annotated, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from devbase.application.dto.task_dto import (
    CreateTaskRequestDTO,
    DeleteTaskResponseDTO,
    ListTasksQueryDTO,
    TaskResponseDTO,
    UpdateTaskRequestDTO,
)
from devbase.application.use_cases.base_use_case import RequestContext
from devbase.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from devbase.domain.models.task import TaskStatus
from devbase.infrastructure.web.dependencies import (
    get_create_task_use_case,
    get_delete_task_use_case,
    get_get_task_use_case,
    get_list_tasks_use_case,
    get_update_task_use_case,
)
from devbase.infrastructure.web.middleware.auth_middleware import CurrentPrincipal, require_auth
from devbase.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter(dependencies=[Depends(require_auth)])

TaskId = Annotated[UUID, Path(description="Task ID")]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TaskResponseDTO)
async def create_task(
    body: CreateTaskRequestDTO,
    principal: CurrentPrincipal,
    use_case: Annotated[CreateTaskUseCase, Depends(get_create_task_use_case)]
):
    """
    Create a task in one of the caller's projects.

    - **projectId**: Project UUID (must belong to the caller)
    - **title**: 1 to 120 characters
    - **status**: TODO, DOING or DONE (defaults to TODO)
    """
    return unwrap_result(await use_case.execute(RequestContext(principal=principal, body=body)))


@router.get("", response_model=List[TaskResponseDTO])
async def list_tasks(
    principal: CurrentPrincipal,
    use_case: Annotated[ListTasksUseCase, Depends(get_list_tasks_use_case)],
    project_id: Optional[UUID] = Query(None, alias="projectId", description="Filter by project"),
    task_status: Optional[TaskStatus] = Query(None, alias="status", description="Filter by status")
):
    """List the caller's tasks, newest first."""
    query = ListTasksQueryDTO(project_id=project_id, status=task_status)
    return unwrap_result(await use_case.execute(RequestContext(principal=principal, query=query)))


@router.get("/{task_id}", response_model=TaskResponseDTO)
async def get_task(
    task_id: TaskId,
    principal: CurrentPrincipal,
    use_case: Annotated[GetTaskUseCase, Depends(get_get_task_use_case)]
):
    context = RequestContext(principal=principal, params={"task_id": str(task_id)})
    return unwrap_result(await use_case.execute(context))


@router.patch("/{task_id}", response_model=TaskResponseDTO)
async def update_task(
    task_id: TaskId,
    body: UpdateTaskRequestDTO,
    principal: CurrentPrincipal,
    use_case: Annotated[UpdateTaskUseCase, Depends(get_update_task_use_case)]
):
    """Update a task's title and/or status."""
    context = RequestContext(principal=principal, body=body, params={"task_id": str(task_id)})
    return unwrap_result(await use_case.execute(context))


@router.delete("/{task_id}", response_model=DeleteTaskResponseDTO)
async def delete_task(
    task_id: TaskId,
    principal: CurrentPrincipal,
    use_case: Annotated[DeleteTaskUseCase, Depends(get_delete_task_use_case)]
):
    context = RequestContext(principal=principal, params={"task_id": str(task_id)})
    return unwrap_result(await use_case.execute(context))
