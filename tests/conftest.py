"""
Shared fixtures: in-memory repositories, services and a test application.
"""

import os

# Settings are read when devbase.main is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./devbase-test.db")
os.environ.setdefault("JWT_ACCESS_SECRET", "test-access-secret")
os.environ.setdefault("JWT_REFRESH_SECRET", "test-refresh-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import uuid
from dataclasses import replace
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from devbase.config import Settings
from devbase.domain.models.base import EmailAlreadyInUseError
from devbase.domain.models.principal import Principal
from devbase.domain.models.project import Project
from devbase.domain.models.task import Task, TaskStatus
from devbase.domain.models.user import User
from devbase.domain.repositories.project_repository import ProjectRepository, ProjectSortField, SortOrder
from devbase.domain.repositories.task_repository import TaskRepository
from devbase.domain.repositories.user_repository import UserRepository
from devbase.domain.services.ownership_service import OwnershipService
from devbase.infrastructure.auth.jwt_handler import TokenService
from devbase.infrastructure.auth.password_hasher import PasswordHasher
from devbase.main import create_application


ACCESS_SECRET = "test-access-secret"
REFRESH_SECRET = "test-refresh-secret"
PASSWORD = "correct-horse-battery"


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self.users: Dict[str, User] = {}

    async def add(self, user: User) -> User:
        if any(u.email == user.email for u in self.users.values()):
            raise EmailAlreadyInUseError()
        stored = replace(user, id=user.id or str(uuid.uuid4()))
        self.users[stored.id] = stored
        return replace(stored)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return replace(user) if user else None

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return replace(user)
        return None

    async def exists_by_email(self, email: str) -> bool:
        return await self.find_by_email(email) is not None


class InMemoryProjectRepository(ProjectRepository):
    def __init__(self):
        self.projects: Dict[str, Project] = {}

    async def add(self, project: Project) -> Project:
        stored = replace(project, id=project.id or str(uuid.uuid4()))
        self.projects[stored.id] = stored
        return replace(stored)

    async def find_owned(self, project_id: str, owner_id: str) -> Optional[Project]:
        project = self.projects.get(project_id)
        if project is None or project.owner_id != owner_id:
            return None
        return replace(project)

    def _matching(self, owner_id: str, search: Optional[str]) -> List[Project]:
        return [
            p for p in self.projects.values()
            if p.owner_id == owner_id and (not search or search.lower() in p.name.lower())
        ]

    async def list_owned(
        self,
        owner_id: str,
        search: Optional[str] = None,
        sort_by: ProjectSortField = ProjectSortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
        offset: int = 0,
        limit: int = 10
    ) -> List[Project]:
        attribute = {
            ProjectSortField.CREATED_AT: "created_at",
            ProjectSortField.UPDATED_AT: "updated_at",
            ProjectSortField.NAME: "name",
        }[ProjectSortField(sort_by)]
        projects = sorted(
            self._matching(owner_id, search),
            key=lambda p: getattr(p, attribute),
            reverse=SortOrder(sort_order) == SortOrder.DESC,
        )
        return [replace(p) for p in projects[offset:offset + limit]]

    async def count_owned(self, owner_id: str, search: Optional[str] = None) -> int:
        return len(self._matching(owner_id, search))

    async def save(self, project: Project) -> Optional[Project]:
        if await self.find_owned(project.id, project.owner_id) is None:
            return None
        self.projects[project.id] = replace(project)
        return replace(project)

    async def delete_owned(self, project_id: str, owner_id: str) -> bool:
        if await self.find_owned(project_id, owner_id) is None:
            return False
        del self.projects[project_id]
        return True


class InMemoryTaskRepository(TaskRepository):
    def __init__(self):
        self.tasks: Dict[str, Task] = {}

    async def add(self, task: Task) -> Task:
        stored = replace(task, id=task.id or str(uuid.uuid4()))
        self.tasks[stored.id] = stored
        return replace(stored)

    async def find_for_user(self, task_id: str, user_id: str) -> Optional[Task]:
        task = self.tasks.get(task_id)
        if task is None or task.user_id != user_id:
            return None
        return replace(task)

    async def list_for_user(
        self,
        user_id: str,
        project_id: Optional[str] = None,
        status: Optional[TaskStatus] = None
    ) -> List[Task]:
        tasks = [
            t for t in self.tasks.values()
            if t.user_id == user_id
            and (project_id is None or t.project_id == project_id)
            and (status is None or t.status == status)
        ]
        return [replace(t) for t in sorted(tasks, key=lambda t: t.created_at, reverse=True)]

    async def save(self, task: Task) -> Optional[Task]:
        if await self.find_for_user(task.id, task.user_id) is None:
            return None
        self.tasks[task.id] = replace(task)
        return replace(task)

    async def delete_for_user(self, task_id: str, user_id: str) -> bool:
        if await self.find_for_user(task_id, user_id) is None:
            return False
        del self.tasks[task_id]
        return True


@pytest.fixture
def token_service():
    return TokenService(access_secret=ACCESS_SECRET, refresh_secret=REFRESH_SECRET)


@pytest.fixture(scope="session")
def password_hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def project_repository():
    return InMemoryProjectRepository()


@pytest.fixture
def task_repository():
    return InMemoryTaskRepository()


@pytest.fixture
def ownership_service(project_repository, task_repository):
    return OwnershipService(project_repository, task_repository)


@pytest.fixture
def alice():
    return Principal(id=str(uuid.uuid4()))


@pytest.fixture
def bob():
    return Principal(id=str(uuid.uuid4()))


@pytest.fixture
def settings(tmp_path):
    return Settings(
        environment="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'devbase.db'}",
        database_auto_create=True,
        jwt_access_secret=ACCESS_SECRET,
        jwt_refresh_secret=REFRESH_SECRET,
        bcrypt_rounds=4,
    )


@pytest.fixture
def client(settings):
    with TestClient(create_application(settings)) as test_client:
        yield test_client


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_user(client):
    """POST /api/auth/register and return the response."""
    def _register(email: str, password: str = PASSWORD, name: Optional[str] = None):
        body = {"email": email, "password": password}
        if name is not None:
            body["name"] = name
        return client.post("/api/auth/register", json=body)
    return _register


@pytest.fixture
def auth_headers(register_user):
    """Register a fresh account and return its Authorization header."""
    def _auth_headers(email: Optional[str] = None) -> Dict[str, str]:
        response = register_user(email or f"user-{uuid.uuid4().hex[:8]}@example.com")
        assert response.status_code == 201, response.text
        return bearer(response.json()["accessToken"])
    return _auth_headers
