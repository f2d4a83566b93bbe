"""
Domain models package.
"""

from .base import (
    BaseEntity,
    DomainException,
    Email,
    EmailAlreadyInUseError,
    EntityNotFoundError,
    ErrorKind,
    InvalidCredentialsError,
    InvalidTokenError,
    UnauthorizedError,
    UserNotFoundError,
    ValidationError,
    ValueObject,
    utcnow,
)
from .principal import Principal
from .project import Project
from .task import Task, TaskStatus
from .user import User

__all__ = [
    "BaseEntity",
    "DomainException",
    "Email",
    "EmailAlreadyInUseError",
    "EntityNotFoundError",
    "ErrorKind",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "UnauthorizedError",
    "UserNotFoundError",
    "ValidationError",
    "ValueObject",
    "utcnow",
    "Principal",
    "Project",
    "Task",
    "TaskStatus",
    "User",
]
