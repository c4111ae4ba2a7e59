"""
Rate Limiting Unit Tests

Tests for token bucket and rate limiter functionality.
"""

import time
from unittest.mock import MagicMock

import pytest


def _request(host: str = "127.0.0.1", forwarded: str | None = None) -> MagicMock:
    request = MagicMock()
    request.client.host = host
    request.headers.get.return_value = forwarded
    return request


class TestTokenBucket:
    """Tests for TokenBucket implementation."""

    def test_initial_tokens_at_capacity(self):
        """Verify bucket starts at full capacity."""
        from app.middleware.rate_limit import TokenBucket

        bucket = TokenBucket(capacity=10, refill_rate=1.0)

        assert bucket.tokens == 10.0

    def test_consume_fails_when_empty(self):
        """Verify consume fails when insufficient tokens."""
        from app.middleware.rate_limit import TokenBucket

        bucket = TokenBucket(capacity=2, refill_rate=0.1)

        assert bucket.consume(2) is True
        assert bucket.consume(1) is False

    def test_refill_over_time(self):
        """Verify tokens refill over time."""
        from app.middleware.rate_limit import TokenBucket

        bucket = TokenBucket(capacity=10, refill_rate=10.0)  # 10 tokens/sec

        bucket.consume(10)
        time.sleep(0.5)
        bucket._refill()

        assert bucket.tokens >= 4.0

    def test_refill_never_exceeds_capacity(self):
        from app.middleware.rate_limit import TokenBucket

        bucket = TokenBucket(capacity=3, refill_rate=1000.0)
        time.sleep(0.01)
        bucket._refill()

        assert bucket.tokens == 3.0


class TestRateLimiter:
    """Tests for RateLimiter implementation."""

    def test_blocks_requests_over_burst(self):
        """Verify requests over burst limit are blocked."""
        from app.middleware.rate_limit import RateLimiter

        limiter = RateLimiter(requests_per_minute=60, burst_capacity=3)
        request = _request("192.168.1.1")

        for _ in range(3):
            assert limiter.is_allowed(request) is True
        assert limiter.is_allowed(request) is False

    def test_clients_have_separate_buckets(self):
        from app.middleware.rate_limit import RateLimiter

        limiter = RateLimiter(requests_per_minute=60, burst_capacity=1)

        assert limiter.is_allowed(_request("10.0.0.1")) is True
        assert limiter.is_allowed(_request("10.0.0.2")) is True
        assert limiter.is_allowed(_request("10.0.0.1")) is False

    def test_key_prefers_forwarded_for(self):
        """Verify the first X-Forwarded-For address identifies the client."""
        from app.middleware.rate_limit import RateLimiter

        limiter = RateLimiter()

        key = limiter._get_key(_request("10.0.0.1", forwarded="203.0.113.7, 10.0.0.1"))

        assert key == "ip:203.0.113.7"

    def test_cleanup_removes_stale_buckets(self):
        """Verify cleanup removes old buckets."""
        from app.middleware.rate_limit import RateLimiter

        limiter = RateLimiter(requests_per_minute=60, burst_capacity=5)
        limiter.is_allowed(_request("10.0.0.1"))

        assert limiter.cleanup(max_age=0) == 1
        assert limiter._buckets == {}

    @pytest.mark.asyncio
    async def test_dependency_raises_429(self):
        from fastapi import HTTPException

        from app.middleware.rate_limit import RateLimiter

        limiter = RateLimiter(requests_per_minute=60, burst_capacity=1)
        request = _request()

        await limiter(request)
        with pytest.raises(HTTPException) as exc_info:
            await limiter(request)

        assert exc_info.value.status_code == 429
        assert exc_info.value.headers["Retry-After"] == "60"

    def test_reset_clears_buckets(self):
        from app.middleware.rate_limit import RateLimiter

        limiter = RateLimiter(burst_capacity=1)
        request = _request()
        limiter.is_allowed(request)

        limiter.reset()

        assert limiter.is_allowed(request) is True
