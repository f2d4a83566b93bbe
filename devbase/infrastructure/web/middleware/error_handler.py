"""
Error handling for the web boundary.
Every error response uses the envelope
``{"error": {"code": ..., "message": ..., "details"?: [...]}}``.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, TypeVar

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from devbase.application.use_cases.base_use_case import UseCaseResult
from devbase.domain.models.base import ErrorKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


# One row per ErrorKind: this table is the only place service outcomes become HTTP statuses
ERROR_KIND_RESPONSES: Dict[ErrorKind, Tuple[int, str]] = {
    ErrorKind.VALIDATION: (status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
    ErrorKind.UNAUTHORIZED: (status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED"),
    ErrorKind.INVALID_CREDENTIALS: (status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED"),
    ErrorKind.INVALID_TOKEN: (status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED"),
    ErrorKind.USER_NOT_FOUND: (status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED"),
    ErrorKind.EMAIL_ALREADY_IN_USE: (status.HTTP_409_CONFLICT, "EMAIL_ALREADY_IN_USE"),
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
}


def error_envelope(
    code: str,
    message: str,
    details: Optional[List[Dict[str, str]]] = None
) -> Dict[str, Any]:
    """Build the uniform error body."""
    error: Dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"error": error}


class ApiException(Exception):
    """
    Base exception for errors raised at the HTTP boundary.
    Rendered into the error envelope by ``api_exception_handler``.
    """
    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[List[Dict[str, str]]] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details
        self.headers = headers
        super().__init__(self.message)


class UnauthorizedException(ApiException):
    """Exception raised for authentication errors."""
    def __init__(self, message: str = "Authentication required"):
        super().__init__(
            message=message,
            error_code="UNAUTHORIZED",
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"}
        )


class CorsForbiddenException(ApiException):
    """Exception raised when the request origin is not allowed."""
    def __init__(self):
        super().__init__(
            message="CORS forbidden for this origin",
            error_code="CORS_FORBIDDEN",
            status_code=status.HTTP_403_FORBIDDEN
        )


class TooManyRequestsException(ApiException):
    """Exception raised when a rate limit is exceeded."""
    def __init__(self, headers: Optional[Dict[str, str]] = None):
        super().__init__(
            message="Too many requests, please try again later",
            error_code="TOO_MANY_REQUESTS",
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            headers=headers
        )


def exception_from_result(result: UseCaseResult[Any]) -> ApiException:
    """Translate a failed use case result into the matching boundary exception."""
    status_code, code = ERROR_KIND_RESPONSES[result.error_kind]
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return ApiException(
        message=result.error or code,
        error_code=code,
        status_code=status_code,
        headers=headers
    )


def unwrap_result(result: UseCaseResult[T]) -> T:
    """Return the data of a successful result, or raise its boundary exception."""
    if not result.success:
        raise exception_from_result(result)
    return result.data


def api_error_response(exc: ApiException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.error_code, exc.message, exc.details),
        headers=exc.headers
    )


async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    return api_error_response(exc)


def _validation_details(exc: RequestValidationError) -> List[Dict[str, str]]:
    details = []
    for error in exc.errors():
        location = list(error.get("loc", ()))
        if location and location[0] in ("body", "query", "path", "header", "cookie"):
            location = location[1:]
        message = str(error.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({
            "path": ".".join(str(part) for part in location),
            "message": message
        })
    return details


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 400 with per-field details."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope("VALIDATION_ERROR", "Validation failed", _validation_details(exc))
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors (unknown route, wrong method) in the envelope."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        code, message = "NOT_FOUND", f"Route not found: {request.method} {request.url.path}"
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        code, message = "METHOD_NOT_ALLOWED", f"Method not allowed: {request.method} {request.url.path}"
    else:
        code, message = "HTTP_ERROR", str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(code, message),
        headers=getattr(exc, "headers", None)
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions.
    Details go to the server log only; the client gets a generic 500.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            exc_info=exc,
            extra={
                "request_path": request.url.path,
                "request_method": request.method,
                "client_host": request.client.host if request.client else None
            }
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope("INTERNAL_SERVER_ERROR", "Internal server error")
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope renderers to the application."""
    app.add_exception_handler(ApiException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
