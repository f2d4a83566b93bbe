"""
User domain model.
Represents an account holder with login credentials.
"""

from dataclasses import dataclass, field
from typing import Optional

from devbase.domain.models.base import BaseEntity, Email, ValidationError


@dataclass
class User(BaseEntity):
    """
    User aggregate root.
    The password hash stays inside the domain and persistence layers; DTOs
    only ever copy the public fields.
    """

    email: str = ""
    password_hash: str = field(default="", repr=False)
    name: Optional[str] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        # Email raises ValidationError on malformed or non-normalised input
        Email(self.email)

        if not self.password_hash:
            raise ValidationError("Password hash is required", "password_hash")

        if self.name is not None and not self.name.strip():
            raise ValidationError("Name cannot be blank", "name")

    @classmethod
    def create(cls, email: str, password_hash: str, name: Optional[str] = None) -> "User":
        """Create a new user from raw registration input."""
        return cls(
            email=Email.normalized(email).value,
            password_hash=password_hash,
            name=name.strip() if name and name.strip() else None,
        )
