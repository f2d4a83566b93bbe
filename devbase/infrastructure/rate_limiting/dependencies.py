"""
Rate limiting FastAPI dependencies.
"""

from typing import Callable, Optional

from fastapi import Request

from devbase.infrastructure.rate_limiting.limiter import RateLimiter, RateLimitStatus
from devbase.infrastructure.web.middleware.error_handler import TooManyRequestsException


def get_rate_limiter(request: Request) -> RateLimiter:
    """Dependency to get the application's rate limiter."""
    return request.app.state.rate_limiter


def create_rate_limit_dependency(limit_name: str) -> Callable:
    """
    Create a FastAPI dependency for a named rate limit.

    Usage:
        login_rate_limit = create_rate_limit_dependency('login')

        @router.post("/login", dependencies=[Depends(login_rate_limit)])
        async def login(...):
            ...
    """
    async def rate_limit_dependency(request: Request) -> Optional[RateLimitStatus]:
        status_result = get_rate_limiter(request).check_rate_limit(request, limit_name)

        if status_result is not None and status_result.exceeded:
            raise TooManyRequestsException(headers=status_result.to_headers())

        return status_result

    return rate_limit_dependency


# Predefined dependencies
login_rate_limit = create_rate_limit_dependency('login')
