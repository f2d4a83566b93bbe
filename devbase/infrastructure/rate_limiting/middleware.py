"""
Global rate limit applied to every API request.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from devbase.infrastructure.rate_limiting.limiter import RateLimiter
from devbase.infrastructure.web.middleware.error_handler import TooManyRequestsException, api_error_response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Counts requests under ``path_prefix`` against the ``api`` limit."""

    def __init__(self, app, limiter: RateLimiter, path_prefix: str = "/api"):
        super().__init__(app)
        self.limiter = limiter
        self.path_prefix = path_prefix

    async def dispatch(self, request: Request, call_next):
        if not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        status_result = self.limiter.check_rate_limit(request, 'api')
        if status_result is None:
            return await call_next(request)

        if status_result.exceeded:
            # Exception handlers do not cover middleware, render directly
            return api_error_response(TooManyRequestsException(headers=status_result.to_headers()))

        response = await call_next(request)
        response.headers.update(status_result.to_headers())
        return response
