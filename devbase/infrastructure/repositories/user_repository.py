"""
User repository implementation using SQLAlchemy.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devbase.domain.models.base import EmailAlreadyInUseError
from devbase.domain.models.user import User
from devbase.domain.repositories.user_repository import UserRepository as UserRepositoryInterface
from devbase.infrastructure.db.models import UserModel
from devbase.infrastructure.mappers.user_mapper import UserMapper

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(UserRepositoryInterface):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.mapper = UserMapper()

    async def add(self, user: User) -> User:
        model = self.mapper.domain_to_model(user)
        self.session.add(model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.info("Unique email constraint hit on insert")
            raise EmailAlreadyInUseError()
        return self.mapper.model_to_domain(model)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        model = await self.session.get(UserModel, user_id)
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        model = result.scalar_one_or_none()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def exists_by_email(self, email: str) -> bool:
        result = await self.session.execute(
            select(UserModel.id).where(UserModel.email == email)
        )
        return result.first() is not None
