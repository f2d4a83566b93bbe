"""
Authentication dependencies for FastAPI.
The services are built once in the application factory and read from ``app.state``.
"""

from fastapi import Request

from devbase.config import Settings
from devbase.infrastructure.auth.jwt_handler import TokenService
from devbase.infrastructure.auth.password_hasher import PasswordHasher


def get_app_settings(request: Request) -> Settings:
    """Dependency to get the settings the application was built with."""
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    """Dependency to get the token service."""
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    """Dependency to get the password hasher."""
    return request.app.state.password_hasher
