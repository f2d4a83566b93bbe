"""
Task mapper for converting between domain entities and database models.
"""

from devbase.domain.models.task import Task, TaskStatus
from devbase.infrastructure.db.models import TaskModel
from devbase.infrastructure.mappers.user_mapper import as_utc


class TaskMapper:
    """Maps between Task domain entity and TaskModel database model."""

    def domain_to_model(self, task: Task) -> TaskModel:
        return TaskModel(
            id=task.id,
            project_id=task.project_id,
            user_id=task.user_id,
            title=task.title,
            status=task.status,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    def model_to_domain(self, model: TaskModel) -> Task:
        return Task(
            id=model.id,
            project_id=model.project_id,
            user_id=model.user_id,
            title=model.title,
            status=TaskStatus(model.status) if model.status else TaskStatus.TODO,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
