"""
Project mapper for converting between domain entities and database models.
"""

from devbase.domain.models.project import Project
from devbase.infrastructure.db.models import ProjectModel
from devbase.infrastructure.mappers.user_mapper import as_utc


class ProjectMapper:
    """Maps between Project domain entity and ProjectModel database model."""

    def domain_to_model(self, project: Project) -> ProjectModel:
        return ProjectModel(
            id=project.id,
            owner_id=project.owner_id,
            name=project.name,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )

    def model_to_domain(self, model: ProjectModel) -> Project:
        return Project(
            id=model.id,
            owner_id=model.owner_id,
            name=model.name,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
