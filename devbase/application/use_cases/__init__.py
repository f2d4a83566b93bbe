"""
Use cases for the application layer.
"""

from .base_use_case import AuthorizedUseCase, BaseUseCase, RequestContext, UseCaseResult
from .auth_use_cases import LoginUseCase, LogoutUseCase, RefreshAccessTokenUseCase, RegisterUseCase
from .project_use_cases import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)
from .task_use_cases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)

__all__ = [
    "AuthorizedUseCase",
    "BaseUseCase",
    "RequestContext",
    "UseCaseResult",
    "LoginUseCase",
    "LogoutUseCase",
    "RefreshAccessTokenUseCase",
    "RegisterUseCase",
    "CreateProjectUseCase",
    "DeleteProjectUseCase",
    "GetProjectUseCase",
    "ListProjectsUseCase",
    "UpdateProjectUseCase",
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "GetTaskUseCase",
    "ListTasksUseCase",
    "UpdateTaskUseCase",
]
