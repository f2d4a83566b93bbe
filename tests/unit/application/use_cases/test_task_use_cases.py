"""
Unit tests for the task use cases.
"""

import uuid

import pytest

from devbase.application.dto.task_dto import CreateTaskRequestDTO, ListTasksQueryDTO, UpdateTaskRequestDTO
from devbase.application.use_cases.base_use_case import RequestContext
from devbase.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from devbase.domain.models.base import ErrorKind
from devbase.domain.models.project import Project
from devbase.domain.models.task import TaskStatus


@pytest.fixture
def create_task(task_repository, ownership_service):
    async def _create(principal, project_id, title="Write tests", status=None):
        body = CreateTaskRequestDTO(project_id=project_id, title=title, status=status)
        return await CreateTaskUseCase(task_repository, ownership_service).execute(
            RequestContext(principal=principal, body=body)
        )
    return _create


@pytest.fixture
def project_of(project_repository):
    async def _project(principal, name="Alpha"):
        return await project_repository.add(Project(name=name, owner_id=principal.id))
    return _project


class TestCreateTask:

    @pytest.mark.asyncio
    async def test_create_in_own_project(self, create_task, project_of, alice):
        project = await project_of(alice)

        result = await create_task(alice, project.id)

        assert result.success
        assert result.data.status == TaskStatus.TODO
        assert result.data.project_id == project.id
        assert result.data.user_id == alice.id

    @pytest.mark.asyncio
    async def test_foreign_project_fails_before_insert(self, create_task, project_of, task_repository, alice, bob):
        project = await project_of(alice)

        result = await create_task(bob, project.id)

        assert result.error_kind == ErrorKind.NOT_FOUND
        assert result.error == "Project not found"
        assert task_repository.tasks == {}

    @pytest.mark.asyncio
    async def test_unknown_project(self, create_task, alice):
        result = await create_task(alice, uuid.uuid4())
        assert result.error == "Project not found"


class TestTaskAccess:

    @pytest.mark.asyncio
    async def test_other_user_cannot_touch_task(self, create_task, project_of, task_repository, ownership_service, alice, bob):
        project = await project_of(alice)
        task = (await create_task(alice, project.id)).data
        params = {"task_id": task.id}

        results = [
            await GetTaskUseCase(ownership_service).execute(RequestContext(principal=bob, params=params)),
            await UpdateTaskUseCase(task_repository, ownership_service).execute(
                RequestContext(principal=bob, body=UpdateTaskRequestDTO(status="DONE"), params=params)
            ),
            await DeleteTaskUseCase(task_repository, ownership_service).execute(
                RequestContext(principal=bob, params=params)
            ),
        ]

        for result in results:
            assert result.error_kind == ErrorKind.NOT_FOUND
            assert result.error == "Task not found"

    @pytest.mark.asyncio
    async def test_update_then_delete(self, create_task, project_of, task_repository, ownership_service, alice):
        project = await project_of(alice)
        task = (await create_task(alice, project.id)).data
        params = {"task_id": task.id}

        updated = await UpdateTaskUseCase(task_repository, ownership_service).execute(
            RequestContext(principal=alice, body=UpdateTaskRequestDTO(title="Renamed", status="DOING"), params=params)
        )
        deleted = await DeleteTaskUseCase(task_repository, ownership_service).execute(
            RequestContext(principal=alice, params=params)
        )

        assert updated.data.title == "Renamed"
        assert updated.data.status == TaskStatus.DOING
        assert deleted.data.deleted is True


class TestListTasks:

    @pytest.mark.asyncio
    async def test_filters(self, create_task, project_of, task_repository, alice, bob):
        alpha = await project_of(alice, "Alpha")
        beta = await project_of(alice, "Beta")
        await create_task(alice, alpha.id, "One")
        await create_task(alice, beta.id, "Two", status="DONE")
        await create_task(bob, (await project_of(bob)).id, "Not mine")

        use_case = ListTasksUseCase(task_repository)
        everything = await use_case.execute(RequestContext(principal=alice))
        in_beta = await use_case.execute(
            RequestContext(principal=alice, query=ListTasksQueryDTO(project_id=uuid.UUID(beta.id)))
        )
        done = await use_case.execute(RequestContext(principal=alice, query=ListTasksQueryDTO(status="DONE")))

        assert sorted(t.title for t in everything.data) == ["One", "Two"]
        assert [t.title for t in in_beta.data] == ["Two"]
        assert [t.title for t in done.data] == ["Two"]
