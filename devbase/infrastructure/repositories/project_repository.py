"""
Project repository implementation using SQLAlchemy.
"""

from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from devbase.domain.models.project import Project
from devbase.domain.repositories.project_repository import (
    ProjectRepository as ProjectRepositoryInterface,
    ProjectSortField,
    SortOrder,
)
from devbase.infrastructure.db.models import ProjectModel
from devbase.infrastructure.mappers.project_mapper import ProjectMapper


_SORT_COLUMNS = {
    ProjectSortField.CREATED_AT: ProjectModel.created_at,
    ProjectSortField.UPDATED_AT: ProjectModel.updated_at,
    ProjectSortField.NAME: ProjectModel.name,
}


class SQLAlchemyProjectRepository(ProjectRepositoryInterface):
    """SQLAlchemy implementation of project repository."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.mapper = ProjectMapper()

    def _owned(self, owner_id: str, search: Optional[str] = None):
        conditions = [ProjectModel.owner_id == owner_id]
        if search:
            conditions.append(
                func.lower(ProjectModel.name).contains(search.lower(), autoescape=True)
            )
        return conditions

    async def add(self, project: Project) -> Project:
        model = self.mapper.domain_to_model(project)
        self.session.add(model)
        await self.session.commit()
        return self.mapper.model_to_domain(model)

    async def find_owned(self, project_id: str, owner_id: str) -> Optional[Project]:
        result = await self.session.execute(
            select(ProjectModel).where(
                ProjectModel.id == project_id,
                ProjectModel.owner_id == owner_id
            )
        )
        model = result.scalar_one_or_none()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def list_owned(
        self,
        owner_id: str,
        search: Optional[str] = None,
        sort_by: ProjectSortField = ProjectSortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
        offset: int = 0,
        limit: int = 10
    ) -> List[Project]:
        column = _SORT_COLUMNS[ProjectSortField(sort_by)]
        if SortOrder(sort_order) == SortOrder.ASC:
            order = (column.asc(), ProjectModel.id.asc())
        else:
            order = (column.desc(), ProjectModel.id.desc())

        result = await self.session.execute(
            select(ProjectModel)
            .where(*self._owned(owner_id, search))
            .order_by(*order)
            .offset(offset)
            .limit(limit)
        )
        return [self.mapper.model_to_domain(model) for model in result.scalars().all()]

    async def count_owned(self, owner_id: str, search: Optional[str] = None) -> int:
        result = await self.session.execute(
            select(func.count(ProjectModel.id)).where(*self._owned(owner_id, search))
        )
        return result.scalar_one()

    async def save(self, project: Project) -> Optional[Project]:
        result = await self.session.execute(
            select(ProjectModel).where(
                ProjectModel.id == project.id,
                ProjectModel.owner_id == project.owner_id
            )
        )
        model = result.scalar_one_or_none()
        if not model:
            return None

        model.name = project.name
        model.updated_at = project.updated_at
        await self.session.commit()
        return self.mapper.model_to_domain(model)

    async def delete_owned(self, project_id: str, owner_id: str) -> bool:
        result = await self.session.execute(
            delete(ProjectModel).where(
                ProjectModel.id == project_id,
                ProjectModel.owner_id == owner_id
            )
        )
        await self.session.commit()
        return result.rowcount > 0
