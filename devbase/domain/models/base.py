"""
Base entity, value objects and exceptions for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime, timezone
from typing import Optional, Any
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class ErrorKind(str, Enum):
    """
    Kinds of failure a use case can report.
    The web boundary maps each kind to exactly one status code.
    """
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_TOKEN = "invalid_token"
    USER_NOT_FOUND = "user_not_found"
    EMAIL_ALREADY_IN_USE = "email_already_in_use"
    NOT_FOUND = "not_found"


@dataclass
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Provides common attributes and behavior for all entities.
    """

    id: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    def mark_as_updated(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utcnow()

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted)."""
        return self.id is None

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass


class DomainException(Exception):
    """Base exception for domain errors."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        self.message = message
        if kind is not None:
            self.kind = kind
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when entity validation fails."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class UnauthorizedError(DomainException):
    """Raised when a use case needing a principal runs without one."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class InvalidCredentialsError(DomainException):
    """
    Raised on login failure.
    Unknown email and wrong password share this error so callers cannot
    probe which accounts exist.
    """

    kind = ErrorKind.INVALID_CREDENTIALS

    def __init__(self):
        super().__init__("Invalid credentials")


class InvalidTokenError(DomainException):
    """Raised for any token that fails verification: bad signature, malformed or expired."""

    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class UserNotFoundError(DomainException):
    """Raised when a verified refresh token points at a user that no longer exists."""

    kind = ErrorKind.USER_NOT_FOUND

    def __init__(self):
        super().__init__("User not found")


class EmailAlreadyInUseError(DomainException):
    """Raised when registering an email that is already taken."""

    kind = ErrorKind.EMAIL_ALREADY_IN_USE

    def __init__(self):
        super().__init__("Email already in use")


class EntityNotFoundError(DomainException):
    """
    Exception raised when an entity is not found.
    Also raised when the entity exists but belongs to someone else.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_type: str):
        super().__init__(f"{entity_type} not found")
        self.entity_type = entity_type


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.
    Value objects are immutable and are compared by their values.
    """

    def __post_init__(self):
        """Validate value object after creation."""
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        """Validate the value object's state."""
        pass


@dataclass(frozen=True)
class Email(ValueObject):
    """Email value object holding the normalised (trimmed, lowercased) address."""

    value: str

    @classmethod
    def normalized(cls, raw: str) -> "Email":
        """Build an Email from user input."""
        return cls((raw or "").strip().lower())

    def validate(self) -> None:
        """Validate email format."""
        if not self.value:
            raise ValidationError("Email cannot be empty", "email")

        if self.value != self.value.strip().lower():
            raise ValidationError("Email must be normalized", "email")

        # Basic email validation
        if '@' not in self.value or '.' not in self.value.split('@')[1]:
            raise ValidationError(f"Invalid email format: {self.value}", "email")

        if len(self.value) > 255:
            raise ValidationError("Email too long (max 255 characters)", "email")

    def __str__(self) -> str:
        return self.value
