"""
Project DTOs for the application layer.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field, StringConstraints, model_validator

from devbase.application.dto.base_dto import ListResponseDTO, PaginationDTO, RequestDTO, ResponseDTO
from devbase.domain.models.project import PROJECT_NAME_MAX_LENGTH, PROJECT_NAME_MIN_LENGTH, Project
from devbase.domain.repositories.project_repository import ProjectSortField, SortOrder


ProjectName = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=PROJECT_NAME_MIN_LENGTH,
        max_length=PROJECT_NAME_MAX_LENGTH,
    ),
]


SearchTerm = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=80)]


class CreateProjectRequestDTO(RequestDTO):
    """DTO for project creation requests."""

    name: ProjectName


class UpdateProjectRequestDTO(RequestDTO):
    """DTO for partial project updates. At least one field is required."""

    name: Optional[ProjectName] = None

    @model_validator(mode="after")
    def require_one_field(self) -> "UpdateProjectRequestDTO":
        if self.name is None:
            raise ValueError("At least one field must be provided")
        return self


class ListProjectsQueryDTO(PaginationDTO):
    """Query parameters for listing projects."""

    search: Optional[SearchTerm] = Field(default=None, description="Case-insensitive name filter")
    sort_by: ProjectSortField = Field(default=ProjectSortField.CREATED_AT)
    sort_order: SortOrder = Field(default=SortOrder.DESC)


class ProjectResponseDTO(ResponseDTO):
    """DTO for project responses."""

    id: str
    name: str
    owner_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponseDTO":
        return cls(
            id=project.id,
            name=project.name,
            owner_id=project.owner_id,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class ProjectEnvelopeDTO(ResponseDTO):
    """Single-project responses are wrapped as ``{"project": {...}}``."""

    project: ProjectResponseDTO


class ProjectListResponseDTO(ListResponseDTO[ProjectResponseDTO]):
    pass


class DeleteProjectResponseDTO(ResponseDTO):
    ok: bool = True
