"""
Task domain model.
A task belongs to a project and to the user who created it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from devbase.domain.models.base import BaseEntity, ValidationError


TASK_TITLE_MAX_LENGTH = 120


class TaskStatus(str, Enum):
    """Task workflow status."""
    TODO = "TODO"
    DOING = "DOING"
    DONE = "DONE"


@dataclass
class Task(BaseEntity):
    """
    Task entity.
    Access is decided by ``user_id`` alone, independent of who owns the
    project today.
    """

    title: str = ""
    status: TaskStatus = TaskStatus.TODO
    project_id: str = ""
    user_id: str = ""

    def __post_init__(self):
        self.status = TaskStatus(self.status)
        self.validate()

    def validate(self) -> None:
        if not self.title or len(self.title) > TASK_TITLE_MAX_LENGTH:
            raise ValidationError(
                f"Task title must be between 1 and {TASK_TITLE_MAX_LENGTH} characters",
                "title",
            )
        if not self.project_id:
            raise ValidationError("Task project is required", "project_id")
        if not self.user_id:
            raise ValidationError("Task user is required", "user_id")

    def update(self, title: Optional[str] = None, status: Optional[TaskStatus] = None) -> None:
        """Apply a partial update; ``None`` leaves the field unchanged."""
        if title is not None:
            self.title = title
        if status is not None:
            self.status = TaskStatus(status)
        self.validate()
        self.mark_as_updated()
