"""
Authentication router.
The refresh token travels only in an HttpOnly cookie scoped to these routes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from devbase.application.dto.auth_dto import (
    AccessTokenResponseDTO,
    AuthResponseDTO,
    LoginRequestDTO,
    LogoutResponseDTO,
    RegisterRequestDTO,
)
from devbase.application.use_cases.auth_use_cases import (
    LoginUseCase,
    LogoutUseCase,
    RefreshAccessTokenUseCase,
    RegisterUseCase,
)
from devbase.application.use_cases.base_use_case import RequestContext
from devbase.config import Settings
from devbase.infrastructure.auth.dependencies import get_app_settings
from devbase.infrastructure.rate_limiting.dependencies import login_rate_limit
from devbase.infrastructure.web.dependencies import (
    get_login_use_case,
    get_logout_use_case,
    get_refresh_use_case,
    get_register_use_case,
)
from devbase.infrastructure.web.middleware.error_handler import unwrap_result


router = APIRouter()

AppSettings = Annotated[Settings, Depends(get_app_settings)]


def set_refresh_cookie(response: Response, refresh_token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.refresh_cookie_name,
        value=refresh_token,
        max_age=int(settings.refresh_token_ttl.total_seconds()),
        path=settings.refresh_cookie_path,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


def clear_refresh_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.refresh_cookie_name,
        path=settings.refresh_cookie_path,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponseDTO)
async def register(
    body: RegisterRequestDTO,
    response: Response,
    use_case: Annotated[RegisterUseCase, Depends(get_register_use_case)],
    settings: AppSettings
):
    """
    Create an account.

    - **email**: Unique email address (trimmed and lowercased)
    - **password**: 8 to 72 characters
    - **name**: Optional display name
    """
    session = unwrap_result(await use_case.execute(RequestContext(body=body)))
    set_refresh_cookie(response, session.refresh_token, settings)
    return AuthResponseDTO.from_session(session)


@router.post("/login", response_model=AuthResponseDTO, dependencies=[Depends(login_rate_limit)])
async def login(
    body: LoginRequestDTO,
    response: Response,
    use_case: Annotated[LoginUseCase, Depends(get_login_use_case)],
    settings: AppSettings
):
    """Exchange email and password for an access token and a refresh cookie."""
    session = unwrap_result(await use_case.execute(RequestContext(body=body)))
    set_refresh_cookie(response, session.refresh_token, settings)
    return AuthResponseDTO.from_session(session)


@router.post("/refresh", response_model=AccessTokenResponseDTO)
async def refresh(
    request: Request,
    use_case: Annotated[RefreshAccessTokenUseCase, Depends(get_refresh_use_case)],
    settings: AppSettings
):
    """Issue a new access token from the refresh cookie. The cookie is left as is."""
    refresh_token = request.cookies.get(settings.refresh_cookie_name)
    return unwrap_result(await use_case.execute(RequestContext(body=refresh_token)))


@router.post("/logout", response_model=LogoutResponseDTO)
async def logout(
    response: Response,
    use_case: Annotated[LogoutUseCase, Depends(get_logout_use_case)],
    settings: AppSettings
):
    """Clear the refresh cookie. Safe to call any number of times."""
    result = unwrap_result(await use_case.execute(RequestContext()))
    clear_refresh_cookie(response, settings)
    return result
