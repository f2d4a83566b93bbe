"""
Origin guard in front of Starlette's CORSMiddleware.
"""

import logging
from typing import List, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from devbase.infrastructure.web.middleware.error_handler import CorsForbiddenException, api_error_response

logger = logging.getLogger(__name__)


class CorsGuardMiddleware(BaseHTTPMiddleware):
    """
    Reject requests whose ``Origin`` is not allowed with 403 CORS_FORBIDDEN.
    Requests without an ``Origin`` header (curl, server to server) pass.
    ``allowed_origins=None`` allows every origin.
    """

    def __init__(self, app, allowed_origins: Optional[List[str]] = None):
        super().__init__(app)
        self.allowed_origins = set(allowed_origins) if allowed_origins is not None else None

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if origin and self.allowed_origins is not None and origin not in self.allowed_origins:
            logger.info("Blocked request from origin %s", origin)
            return api_error_response(CorsForbiddenException())
        return await call_next(request)
