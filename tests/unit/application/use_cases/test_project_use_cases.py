"""
Unit tests for the project use cases.
"""

import pytest

from devbase.application.dto.project_dto import (
    CreateProjectRequestDTO,
    ListProjectsQueryDTO,
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
from devbase.domain.models.base import ErrorKind


@pytest.fixture
def create_project(project_repository):
    async def _create(principal, name="Alpha"):
        result = await CreateProjectUseCase(project_repository).execute(
            RequestContext(principal=principal, body=CreateProjectRequestDTO(name=name))
        )
        assert result.success
        return result.data.project
    return _create


class TestCreateProject:

    @pytest.mark.asyncio
    async def test_create_assigns_owner(self, create_project, alice):
        project = await create_project(alice, "  Roadmap ")

        assert project.name == "Roadmap"
        assert project.owner_id == alice.id

    @pytest.mark.asyncio
    async def test_requires_principal(self, project_repository):
        result = await CreateProjectUseCase(project_repository).execute(
            RequestContext(body=CreateProjectRequestDTO(name="Alpha"))
        )
        assert result.error_kind == ErrorKind.UNAUTHORIZED


class TestOwnershipIsolation:

    @pytest.mark.asyncio
    async def test_other_user_sees_not_found(self, create_project, project_repository, ownership_service, alice, bob):
        project = await create_project(alice)
        params = {"project_id": project.id}

        get_result = await GetProjectUseCase(ownership_service).execute(
            RequestContext(principal=bob, params=params)
        )
        update_result = await UpdateProjectUseCase(project_repository, ownership_service).execute(
            RequestContext(principal=bob, body=UpdateProjectRequestDTO(name="Hijacked"), params=params)
        )
        delete_result = await DeleteProjectUseCase(project_repository, ownership_service).execute(
            RequestContext(principal=bob, params=params)
        )

        for result in (get_result, update_result, delete_result):
            assert result.error_kind == ErrorKind.NOT_FOUND
            assert result.error == "Project not found"

        # Untouched
        stored = await project_repository.find_owned(project.id, alice.id)
        assert stored.name == "Alpha"


class TestUpdateAndDelete:

    @pytest.mark.asyncio
    async def test_rename(self, create_project, project_repository, ownership_service, alice):
        project = await create_project(alice)

        result = await UpdateProjectUseCase(project_repository, ownership_service).execute(
            RequestContext(principal=alice, body=UpdateProjectRequestDTO(name="Beta"), params={"project_id": project.id})
        )

        assert result.data.project.name == "Beta"

    @pytest.mark.asyncio
    async def test_delete(self, create_project, project_repository, ownership_service, alice):
        project = await create_project(alice)
        use_case = DeleteProjectUseCase(project_repository, ownership_service)
        context = RequestContext(principal=alice, params={"project_id": project.id})

        assert (await use_case.execute(context)).data.ok is True
        assert (await use_case.execute(context)).error_kind == ErrorKind.NOT_FOUND


class TestListProjects:

    @pytest.mark.asyncio
    async def test_pagination_envelope(self, create_project, project_repository, alice, bob):
        for name in ["Alpha", "Beta", "Gamma"]:
            await create_project(alice, name)
        await create_project(bob, "Delta")

        result = await ListProjectsUseCase(project_repository).execute(
            RequestContext(principal=alice, query=ListProjectsQueryDTO(page=2, page_size=2, sort_by="name", sort_order="asc"))
        )

        page = result.data
        assert [p.name for p in page.items] == ["Gamma"]
        assert (page.page, page.page_size, page.total, page.total_pages) == (2, 2, 3, 2)

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, create_project, project_repository, alice):
        await create_project(alice, "Website")
        await create_project(alice, "Backend")

        result = await ListProjectsUseCase(project_repository).execute(
            RequestContext(principal=alice, query=ListProjectsQueryDTO(search="  WEB "))
        )

        assert [p.name for p in result.data.items] == ["Website"]
        assert result.data.total == 1

    @pytest.mark.asyncio
    async def test_empty_list(self, project_repository, alice):
        result = await ListProjectsUseCase(project_repository).execute(RequestContext(principal=alice))

        assert result.data.items == []
        assert result.data.total == 0
        assert result.data.total_pages == 0
