"""
Dependency wiring for the routers.
Repositories get the request's session; use cases get their repositories.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from devbase.application.use_cases.auth_use_cases import (
    LoginUseCase,
    LogoutUseCase,
    RefreshAccessTokenUseCase,
    RegisterUseCase,
)
from devbase.application.use_cases.project_use_cases import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)
from devbase.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from devbase.domain.repositories.project_repository import ProjectRepository
from devbase.domain.repositories.task_repository import TaskRepository
from devbase.domain.repositories.user_repository import UserRepository
from devbase.domain.services.ownership_service import OwnershipService
from devbase.infrastructure.auth.dependencies import get_password_hasher, get_token_service
from devbase.infrastructure.auth.jwt_handler import TokenService
from devbase.infrastructure.auth.password_hasher import PasswordHasher
from devbase.infrastructure.db.database import get_db_session
from devbase.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from devbase.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository
from devbase.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_user_repository(session: DbSession) -> UserRepository:
    return SQLAlchemyUserRepository(session)


def get_project_repository(session: DbSession) -> ProjectRepository:
    return SQLAlchemyProjectRepository(session)


def get_task_repository(session: DbSession) -> TaskRepository:
    return SQLAlchemyTaskRepository(session)


Users = Annotated[UserRepository, Depends(get_user_repository)]
Projects = Annotated[ProjectRepository, Depends(get_project_repository)]
Tasks = Annotated[TaskRepository, Depends(get_task_repository)]
Tokens = Annotated[TokenService, Depends(get_token_service)]
Hasher = Annotated[PasswordHasher, Depends(get_password_hasher)]


def get_ownership_service(projects: Projects, tasks: Tasks) -> OwnershipService:
    return OwnershipService(projects, tasks)


Ownership = Annotated[OwnershipService, Depends(get_ownership_service)]


# Auth
def get_register_use_case(users: Users, hasher: Hasher, tokens: Tokens) -> RegisterUseCase:
    return RegisterUseCase(users, hasher, tokens)


def get_login_use_case(users: Users, hasher: Hasher, tokens: Tokens) -> LoginUseCase:
    return LoginUseCase(users, hasher, tokens)


def get_refresh_use_case(users: Users, tokens: Tokens) -> RefreshAccessTokenUseCase:
    return RefreshAccessTokenUseCase(users, tokens)


def get_logout_use_case() -> LogoutUseCase:
    return LogoutUseCase()


# Projects
def get_create_project_use_case(projects: Projects) -> CreateProjectUseCase:
    return CreateProjectUseCase(projects)


def get_list_projects_use_case(projects: Projects) -> ListProjectsUseCase:
    return ListProjectsUseCase(projects)


def get_get_project_use_case(ownership: Ownership) -> GetProjectUseCase:
    return GetProjectUseCase(ownership)


def get_update_project_use_case(projects: Projects, ownership: Ownership) -> UpdateProjectUseCase:
    return UpdateProjectUseCase(projects, ownership)


def get_delete_project_use_case(projects: Projects, ownership: Ownership) -> DeleteProjectUseCase:
    return DeleteProjectUseCase(projects, ownership)


# Tasks
def get_create_task_use_case(tasks: Tasks, ownership: Ownership) -> CreateTaskUseCase:
    return CreateTaskUseCase(tasks, ownership)


def get_list_tasks_use_case(tasks: Tasks) -> ListTasksUseCase:
    return ListTasksUseCase(tasks)


def get_get_task_use_case(ownership: Ownership) -> GetTaskUseCase:
    return GetTaskUseCase(ownership)


def get_update_task_use_case(tasks: Tasks, ownership: Ownership) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(tasks, ownership)


def get_delete_task_use_case(tasks: Tasks, ownership: Ownership) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(tasks, ownership)
