"""
Project domain model.
"""

from dataclasses import dataclass

from devbase.domain.models.base import BaseEntity, ValidationError


PROJECT_NAME_MIN_LENGTH = 2
PROJECT_NAME_MAX_LENGTH = 80


@dataclass
class Project(BaseEntity):
    """A project owned by exactly one user."""

    name: str = ""
    owner_id: str = ""

    def __post_init__(self):
        self.name = (self.name or "").strip()
        self.validate()

    def validate(self) -> None:
        if not PROJECT_NAME_MIN_LENGTH <= len(self.name) <= PROJECT_NAME_MAX_LENGTH:
            raise ValidationError(
                f"Project name must be between {PROJECT_NAME_MIN_LENGTH} "
                f"and {PROJECT_NAME_MAX_LENGTH} characters",
                "name",
            )
        if not self.owner_id:
            raise ValidationError("Project owner is required", "owner_id")

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id == user_id

    def rename(self, name: str) -> None:
        self.name = name.strip()
        self.validate()
        self.mark_as_updated()
