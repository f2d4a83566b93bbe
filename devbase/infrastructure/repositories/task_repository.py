"""
Task repository implementation using SQLAlchemy.
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from devbase.domain.models.task import Task, TaskStatus
from devbase.domain.repositories.task_repository import TaskRepository as TaskRepositoryInterface
from devbase.infrastructure.db.models import TaskModel
from devbase.infrastructure.mappers.task_mapper import TaskMapper


class SQLAlchemyTaskRepository(TaskRepositoryInterface):
    """SQLAlchemy implementation of task repository."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.mapper = TaskMapper()

    async def add(self, task: Task) -> Task:
        model = self.mapper.domain_to_model(task)
        self.session.add(model)
        await self.session.commit()
        return self.mapper.model_to_domain(model)

    async def find_for_user(self, task_id: str, user_id: str) -> Optional[Task]:
        result = await self.session.execute(
            select(TaskModel).where(TaskModel.id == task_id, TaskModel.user_id == user_id)
        )
        model = result.scalar_one_or_none()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def list_for_user(
        self,
        user_id: str,
        project_id: Optional[str] = None,
        status: Optional[TaskStatus] = None
    ) -> List[Task]:
        query = select(TaskModel).where(TaskModel.user_id == user_id)
        if project_id:
            query = query.where(TaskModel.project_id == project_id)
        if status:
            query = query.where(TaskModel.status == TaskStatus(status))

        result = await self.session.execute(
            query.order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
        )
        return [self.mapper.model_to_domain(model) for model in result.scalars().all()]

    async def save(self, task: Task) -> Optional[Task]:
        result = await self.session.execute(
            select(TaskModel).where(TaskModel.id == task.id, TaskModel.user_id == task.user_id)
        )
        model = result.scalar_one_or_none()
        if not model:
            return None

        model.title = task.title
        model.status = task.status
        model.updated_at = task.updated_at
        await self.session.commit()
        return self.mapper.model_to_domain(model)

    async def delete_for_user(self, task_id: str, user_id: str) -> bool:
        result = await self.session.execute(
            delete(TaskModel).where(TaskModel.id == task_id, TaskModel.user_id == user_id)
        )
        await self.session.commit()
        return result.rowcount > 0
