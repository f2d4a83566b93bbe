"""
Authentication DTOs.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, Optional

from pydantic import EmailStr, Field, StringConstraints, field_validator

from devbase.application.dto.base_dto import RequestDTO, ResponseDTO
from devbase.domain.models.user import User


# bcrypt only looks at the first 72 bytes
Password = Annotated[str, Field(min_length=8, max_length=72, description="Password")]
DisplayName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=50)]


class CredentialsDTO(RequestDTO):
    """Email and password; the email is trimmed and lowercased."""

    email: EmailStr = Field(description="User email address")
    password: Password

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class RegisterRequestDTO(CredentialsDTO):
    """DTO for account registration."""

    name: Optional[DisplayName] = Field(default=None, description="Display name")


class LoginRequestDTO(CredentialsDTO):
    """DTO for login."""
    pass


class PublicUserDTO(ResponseDTO):
    """The outward-facing view of a user. Has no password field by construction."""

    id: str
    email: str
    name: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "PublicUserDTO":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
        )


@dataclass(frozen=True)
class AuthSessionDTO:
    """
    What register and login produce.
    The refresh token is kept out of any JSON model so the boundary can
    only deliver it through the cookie.
    """

    user: PublicUserDTO
    access_token: str
    refresh_token: str


class AuthResponseDTO(ResponseDTO):
    """Body of register and login responses."""

    access_token: str
    user: PublicUserDTO

    @classmethod
    def from_session(cls, session: AuthSessionDTO) -> "AuthResponseDTO":
        return cls(access_token=session.access_token, user=session.user)


class AccessTokenResponseDTO(ResponseDTO):
    """Body of the refresh response."""

    access_token: str


class LogoutResponseDTO(ResponseDTO):
    ok: bool = True
