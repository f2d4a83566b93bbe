"""
Task DTOs for the application layer.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field, model_validator

from devbase.application.dto.base_dto import RequestDTO, ResponseDTO
from devbase.domain.models.task import TASK_TITLE_MAX_LENGTH, Task, TaskStatus


class CreateTaskRequestDTO(RequestDTO):
    """DTO for task creation requests."""

    model_config = ConfigDict(extra="ignore")

    project_id: UUID = Field(description="Project the task belongs to")
    title: str = Field(min_length=1, max_length=TASK_TITLE_MAX_LENGTH, description="Task title")
    status: Optional[TaskStatus] = Field(default=None, description="Initial status, TODO if omitted")


class UpdateTaskRequestDTO(RequestDTO):
    """DTO for partial task updates. At least one field is required."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(default=None, min_length=1, max_length=TASK_TITLE_MAX_LENGTH)
    status: Optional[TaskStatus] = None

    @model_validator(mode="after")
    def require_one_field(self) -> "UpdateTaskRequestDTO":
        if self.title is None and self.status is None:
            raise ValueError("At least one field must be provided")
        return self


class ListTasksQueryDTO(RequestDTO):
    """Optional filters for listing tasks."""

    project_id: Optional[UUID] = None
    status: Optional[TaskStatus] = None


class TaskResponseDTO(ResponseDTO):
    """DTO for task responses."""

    id: str
    title: str
    status: TaskStatus
    project_id: str
    user_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponseDTO":
        return cls(
            id=task.id,
            title=task.title,
            status=task.status,
            project_id=task.project_id,
            user_id=task.user_id,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class DeleteTaskResponseDTO(ResponseDTO):
    deleted: bool = True
