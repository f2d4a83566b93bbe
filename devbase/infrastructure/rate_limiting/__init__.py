"""
Rate limiting infrastructure.
"""

from .limiter import InMemoryRateLimiter, RateLimit, RateLimiter, RateLimitStatus
from .dependencies import create_rate_limit_dependency, get_rate_limiter, login_rate_limit
from .middleware import RateLimitMiddleware

__all__ = [
    "InMemoryRateLimiter",
    "RateLimit",
    "RateLimiter",
    "RateLimitStatus",
    "create_rate_limit_dependency",
    "get_rate_limiter",
    "login_rate_limit",
    "RateLimitMiddleware",
]
