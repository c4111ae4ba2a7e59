"""
Rate Limiting

Per-IP token buckets in front of the authentication routes, which are the
only endpoints reachable without a token.

State lives in process memory. Each worker keeps its own buckets.
"""

import time
from dataclasses import dataclass, field
from typing import Dict

from fastapi import HTTPException, Request, status


RETRY_AFTER_SECONDS = 60


# ============== Token Bucket ==============

@dataclass
class TokenBucket:
    """Holds up to ``capacity`` tokens, refilled at ``refill_rate`` per second."""
    capacity: int
    refill_rate: float
    tokens: float = field(init=False)
    last_refill: float = field(init=False)

    def __post_init__(self):
        self.tokens = float(self.capacity)
        self.last_refill = time.monotonic()

    def consume(self, tokens: int = 1) -> bool:
        """Take ``tokens`` if available; False leaves the bucket unchanged."""
        self._refill()
        if self.tokens < tokens:
            return False
        self.tokens -= tokens
        return True

    def _refill(self) -> None:
        now = time.monotonic()
        gained = (now - self.last_refill) * self.refill_rate
        self.tokens = min(float(self.capacity), self.tokens + gained)
        self.last_refill = now


# ============== Limiter ==============

class RateLimiter:
    """
    Callable dependency that rejects clients exceeding their bucket.

    Usage:
        router = APIRouter(dependencies=[Depends(auth_limiter)])
    """

    def __init__(self, requests_per_minute: int = 60, burst_capacity: int = 10):
        self._buckets: Dict[str, TokenBucket] = {}
        self._burst_capacity = burst_capacity
        self._refill_rate = requests_per_minute / 60.0

    def _get_key(self, request: Request) -> str:
        # Behind the hosting proxy the client address is the first hop
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return f"ip:{forwarded.split(',')[0].strip()}"
        return f"ip:{request.client.host if request.client else 'unknown'}"

    def _get_bucket(self, key: str) -> TokenBucket:
        bucket = self._buckets.get(key)
        if bucket is None:
            bucket = TokenBucket(self._burst_capacity, self._refill_rate)
            self._buckets[key] = bucket
        return bucket

    def is_allowed(self, request: Request) -> bool:
        return self._get_bucket(self._get_key(request)).consume()

    def cleanup(self, max_age: float = 3600) -> int:
        """
        Drop buckets idle for longer than ``max_age`` seconds.

        Returns:
            Number of buckets removed.
        """
        cutoff = time.monotonic() - max_age
        stale = [key for key, bucket in self._buckets.items() if bucket.last_refill < cutoff]
        for key in stale:
            del self._buckets[key]
        return len(stale)

    def reset(self) -> None:
        self._buckets.clear()

    async def __call__(self, request: Request) -> None:
        if not self.is_allowed(request):
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail="Demasiados intentos. Intenta de nuevo en un minuto.",
                headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
            )


# Login, signup, Google sign-in and password reset
auth_limiter = RateLimiter(requests_per_minute=10, burst_capacity=5)
