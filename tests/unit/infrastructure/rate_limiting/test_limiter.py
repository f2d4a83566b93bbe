"""
Unit tests for the fixed-window rate limiter.
"""

from types import SimpleNamespace

from devbase.infrastructure.rate_limiting.limiter import InMemoryRateLimiter, RateLimit, RateLimiter


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def fake_request(host: str = "10.0.0.1"):
    return SimpleNamespace(client=SimpleNamespace(host=host))


class TestInMemoryRateLimiter:

    def test_allows_up_to_limit_then_blocks(self):
        limiter = InMemoryRateLimiter(clock=FakeClock())
        rate_limit = RateLimit(requests=3, window=60)

        statuses = [limiter.is_allowed("k", rate_limit) for _ in range(4)]

        assert [s.remaining for s in statuses[:3]] == [2, 1, 0]
        assert not any(s.exceeded for s in statuses[:3])
        assert statuses[3].exceeded
        assert statuses[3].retry_after >= 1

    def test_window_resets(self):
        clock = FakeClock()
        limiter = InMemoryRateLimiter(clock=clock)
        rate_limit = RateLimit(requests=1, window=60)

        limiter.is_allowed("k", rate_limit)
        assert limiter.is_allowed("k", rate_limit).exceeded

        clock.now += 61
        assert not limiter.is_allowed("k", rate_limit).exceeded

    def test_expired_keys_are_swept(self):
        clock = FakeClock()
        limiter = InMemoryRateLimiter(clock=clock)
        rate_limit = RateLimit(requests=5, window=60)

        for i in range(1000):
            limiter.is_allowed(f"ip-{i}", rate_limit)
        assert len(limiter.requests) == 1000

        clock.now += 3600
        limiter.is_allowed("ip-new", rate_limit)

        assert list(limiter.requests) == ["ip-new"]
        assert list(limiter.reset_times) == ["ip-new"]

    def test_live_keys_survive_sweep(self):
        clock = FakeClock(now=1_000_020.0)
        limiter = InMemoryRateLimiter(clock=clock)
        rate_limit = RateLimit(requests=1, window=60)

        limiter.is_allowed("old", rate_limit)
        clock.now += 60
        limiter.is_allowed("fresh", rate_limit)
        clock.now += 1

        assert limiter.is_allowed("fresh", rate_limit).exceeded
        assert "old" not in limiter.requests

    def test_headers(self):
        limiter = InMemoryRateLimiter(clock=FakeClock())
        rate_limit = RateLimit(requests=1, window=60)

        allowed = limiter.is_allowed("k", rate_limit).to_headers()
        blocked = limiter.is_allowed("k", rate_limit).to_headers()

        assert allowed["X-RateLimit-Limit"] == "1"
        assert allowed["X-RateLimit-Remaining"] == "0"
        assert "Retry-After" not in allowed
        assert "Retry-After" in blocked


class TestRateLimiter:

    def test_limits_are_counted_per_ip_and_name(self):
        limiter = RateLimiter(
            {"api": RateLimit(1, 60), "login": RateLimit(1, 60)},
            backend=InMemoryRateLimiter(clock=FakeClock()),
        )

        assert not limiter.check_rate_limit(fake_request("1.1.1.1"), "api").exceeded
        assert limiter.check_rate_limit(fake_request("1.1.1.1"), "api").exceeded
        assert not limiter.check_rate_limit(fake_request("2.2.2.2"), "api").exceeded
        assert not limiter.check_rate_limit(fake_request("1.1.1.1"), "login").exceeded

    def test_disabled_limiter_returns_none(self):
        limiter = RateLimiter({"api": RateLimit(1, 60)}, enabled=False)
        assert limiter.check_rate_limit(fake_request(), "api") is None
