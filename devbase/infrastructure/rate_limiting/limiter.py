"""
Fixed-window rate limiting kept in process memory.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from starlette.requests import Request

from devbase.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimit:
    """Rate limit configuration."""
    requests: int  # Number of requests allowed
    window: int    # Time window in seconds


@dataclass
class RateLimitStatus:
    """Current rate limit status."""
    limit: int
    remaining: int
    reset_time: int
    retry_after: Optional[int] = None

    @property
    def exceeded(self) -> bool:
        return self.retry_after is not None

    def to_headers(self) -> Dict[str, str]:
        """Convert to HTTP headers."""
        headers = {
            'X-RateLimit-Limit': str(self.limit),
            'X-RateLimit-Remaining': str(self.remaining),
            'X-RateLimit-Reset': str(self.reset_time)
        }
        if self.retry_after is not None:
            headers['Retry-After'] = str(self.retry_after)
        return headers


class InMemoryRateLimiter:
    """
    Simple in-memory rate limiter.
    Counters live in this process only; each worker counts separately.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self.requests: Dict[str, int] = {}
        self.reset_times: Dict[str, int] = {}
        self._next_sweep = 0

    def _sweep(self, current_time: int) -> None:
        """Drop every counter whose window has ended."""
        expired = [key for key, reset_time in self.reset_times.items() if reset_time <= current_time]
        for key in expired:
            self.requests.pop(key, None)
            self.reset_times.pop(key, None)
        if expired:
            logger.debug("Swept %d expired rate limit entries", len(expired))

    def is_allowed(self, key: str, rate_limit: RateLimit) -> RateLimitStatus:
        """Check if request is allowed under rate limit, counting it if so."""
        current_time = int(self.clock())
        window_start = current_time - (current_time % rate_limit.window)

        # Clean up old entries, all keys at most once per window
        if current_time >= self._next_sweep:
            self._sweep(current_time)
            self._next_sweep = current_time + rate_limit.window
        elif key in self.reset_times and self.reset_times[key] <= current_time:
            self.requests.pop(key, None)
            self.reset_times.pop(key, None)

        # Initialize or get current count
        if key not in self.requests:
            self.requests[key] = 0
            self.reset_times[key] = window_start + rate_limit.window

        current_count = self.requests[key]

        if current_count >= rate_limit.requests:
            return RateLimitStatus(
                limit=rate_limit.requests,
                remaining=0,
                reset_time=self.reset_times[key],
                retry_after=max(1, self.reset_times[key] - current_time)
            )

        # Increment counter
        self.requests[key] += 1

        return RateLimitStatus(
            limit=rate_limit.requests,
            remaining=rate_limit.requests - (current_count + 1),
            reset_time=self.reset_times[key]
        )


class RateLimiter:
    """Named limits over one backend, keyed per client IP."""

    def __init__(
        self,
        limits: Dict[str, RateLimit],
        enabled: bool = True,
        backend: Optional[InMemoryRateLimiter] = None
    ):
        self.limits = dict(limits)
        self.enabled = enabled
        self.limiter = backend or InMemoryRateLimiter()
        logger.info("Using in-memory rate limiter (enabled=%s)", enabled)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RateLimiter":
        return cls(
            limits={
                'api': RateLimit(settings.rate_limit_requests, settings.rate_limit_period),
                'login': RateLimit(settings.login_rate_limit_requests, settings.login_rate_limit_period),
            },
            enabled=settings.rate_limit_enabled,
        )

    def check_rate_limit(
        self,
        request: Request,
        limit_name: str,
        key_func: Optional[Callable[[Request], str]] = None
    ) -> Optional[RateLimitStatus]:
        """Count the request against ``limit_name``. Returns None when limiting is off."""
        if not self.enabled:
            return None

        if key_func:
            key = key_func(request)
        else:
            key = self._default_key(request)

        status = self.limiter.is_allowed(f"rate_limit:{limit_name}:{key}", self.limits[limit_name])
        if status.exceeded:
            logger.warning("Rate limit '%s' exceeded for %s", limit_name, key)
        return status

    def _default_key(self, request: Request) -> str:
        """Generate default key from request."""
        return request.client.host if request.client else 'unknown'
