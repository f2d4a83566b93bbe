"""
Bearer token authentication for protected routes.

Runs as a router-level dependency so it is evaluated before the request
body is validated, and never touches the database.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request

from devbase.domain.models.base import InvalidTokenError
from devbase.domain.models.principal import Principal
from devbase.infrastructure.auth.dependencies import get_token_service
from devbase.infrastructure.auth.jwt_handler import TokenService
from devbase.infrastructure.web.middleware.error_handler import UnauthorizedException

logger = logging.getLogger(__name__)

MISSING_HEADER = "Missing Authorization header"
INVALID_FORMAT = "Invalid Authorization format. Use Bearer <token>"
INVALID_TOKEN = "Invalid or expired token"


def authenticate(authorization: Optional[str], token_service: TokenService) -> Principal:
    """
    Resolve an ``Authorization`` header value to a principal.

    Raises:
        UnauthorizedException: With one of the three fixed messages
    """
    if not authorization:
        raise UnauthorizedException(MISSING_HEADER)

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise UnauthorizedException(INVALID_FORMAT)

    try:
        payload = token_service.verify_access(parts[1])
    except InvalidTokenError:
        raise UnauthorizedException(INVALID_TOKEN)

    return Principal(id=payload.sub)


async def require_auth(
    request: Request,
    token_service: Annotated[TokenService, Depends(get_token_service)]
) -> Principal:
    """
    FastAPI dependency guarding a router.
    Stores the principal on ``request.state.principal`` and returns it.
    """
    try:
        principal = authenticate(request.headers.get("authorization"), token_service)
    except UnauthorizedException as exc:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        raise

    request.state.principal = principal
    return principal


def get_current_principal(request: Request) -> Principal:
    """Read the principal stored by ``require_auth``."""
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise UnauthorizedException(MISSING_HEADER)
    return principal


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
