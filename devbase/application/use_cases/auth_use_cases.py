"""
Authentication use cases: register, login, refresh and logout.

Tokens are stateless; nothing here touches a session store.
"""

import logging
from typing import Optional

from devbase.application.dto.auth_dto import (
    AccessTokenResponseDTO,
    AuthSessionDTO,
    LoginRequestDTO,
    LogoutResponseDTO,
    PublicUserDTO,
    RegisterRequestDTO,
)
from devbase.application.use_cases.base_use_case import BaseUseCase, RequestContext
from devbase.domain.models.base import (
    EmailAlreadyInUseError,
    InvalidCredentialsError,
    UnauthorizedError,
    UserNotFoundError,
)
from devbase.domain.models.user import User
from devbase.domain.repositories.user_repository import UserRepository
from devbase.infrastructure.auth.jwt_handler import TokenService
from devbase.infrastructure.auth.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


def _issue_session(user: User, token_service: TokenService) -> AuthSessionDTO:
    return AuthSessionDTO(
        user=PublicUserDTO.from_domain(user),
        access_token=token_service.sign_access(user.id),
        refresh_token=token_service.sign_refresh(user.id),
    )


class RegisterUseCase(BaseUseCase[RegisterRequestDTO, AuthSessionDTO]):
    """Create an account and open a session for it."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def _execute_business_logic(self, context: RequestContext[RegisterRequestDTO]) -> AuthSessionDTO:
        request = context.body

        if await self.user_repository.exists_by_email(request.email):
            raise EmailAlreadyInUseError()

        password_hash = await self.password_hasher.hash_async(request.password)
        user = User.create(email=request.email, password_hash=password_hash, name=request.name)

        # Raises EmailAlreadyInUseError if a concurrent register won the unique index
        user = await self.user_repository.add(user)

        logger.info("User registered: %s", user.id)
        return _issue_session(user, self.token_service)


class LoginUseCase(BaseUseCase[LoginRequestDTO, AuthSessionDTO]):
    """
    Exchange credentials for a session.
    Unknown email and wrong password fail identically.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def _execute_business_logic(self, context: RequestContext[LoginRequestDTO]) -> AuthSessionDTO:
        request = context.body

        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            logger.info("Login failed: unknown account")
            raise InvalidCredentialsError()

        if not await self.password_hasher.verify_async(request.password, user.password_hash):
            logger.info("Login failed for user %s", user.id)
            raise InvalidCredentialsError()

        logger.info("User logged in: %s", user.id)
        return _issue_session(user, self.token_service)


class RefreshAccessTokenUseCase(BaseUseCase[Optional[str], AccessTokenResponseDTO]):
    """
    Mint a new access token from a refresh token.
    The refresh token itself is returned to nobody and is not rotated.
    """

    def __init__(self, user_repository: UserRepository, token_service: TokenService):
        self.user_repository = user_repository
        self.token_service = token_service

    async def _validate_request(self, context: RequestContext[Optional[str]]) -> None:
        if not context.body:
            raise UnauthorizedError("Missing refresh token cookie")

    async def _execute_business_logic(self, context: RequestContext[Optional[str]]) -> AccessTokenResponseDTO:
        payload = self.token_service.verify_refresh(context.body)

        user = await self.user_repository.find_by_id(payload.sub)
        if user is None:
            logger.info("Refresh rejected: user %s no longer exists", payload.sub)
            raise UserNotFoundError()

        logger.info("Access token refreshed for user %s", user.id)
        return AccessTokenResponseDTO(access_token=self.token_service.sign_access(user.id))


class LogoutUseCase(BaseUseCase[None, LogoutResponseDTO]):
    """Stateless logout. Always succeeds; the boundary clears the cookie."""

    async def _execute_business_logic(self, context: RequestContext[None]) -> LogoutResponseDTO:
        if context.principal is not None:
            logger.info("User logged out: %s", context.principal.id)
        else:
            logger.info("Logout without session")
        return LogoutResponseDTO()
