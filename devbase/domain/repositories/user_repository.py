"""
User repository interface.
Defines the contract for user data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from devbase.domain.models.user import User


class UserRepository(ABC):
    """Repository interface for User aggregate."""

    @abstractmethod
    async def add(self, user: User) -> User:
        """
        Persist a new user and return it with its ID set.
        Raises EmailAlreadyInUseError if the email is already taken.
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by normalised email. Returns None if not found."""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass
