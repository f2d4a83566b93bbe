"""
Authentication infrastructure: password hashing and JWT tokens.
"""

from .jwt_handler import TokenPayload, TokenService
from .password_hasher import PasswordHasher

__all__ = ["TokenPayload", "TokenService", "PasswordHasher"]
