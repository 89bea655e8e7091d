"""Fixed window rate limiting per client address."""
import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from fastapi import HTTPException, Request, Response, status

from config import settings

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again after 15 minutes"


@dataclass
class RateLimitResult:
    allowed: bool
    limit: int
    remaining: int
    reset_after: float


class FixedWindowRateLimiter:
    """
    Counts hits per key inside windows of ``window_seconds``.

    A window opens on the first hit for a key and the count restarts once it
    has elapsed. The clock is injectable so tests can move time forward.
    """

    def __init__(self, max_requests: int, window_seconds: float,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._lock = threading.Lock()

    def hit(self, key: str, now: Optional[float] = None) -> RateLimitResult:
        if now is None:
            now = self._clock()
        with self._lock:
            started, count = self._windows.get(key, (now, 0))
            if now - started >= self.window_seconds:
                started, count = now, 0
            count += 1
            self._windows[key] = (started, count)

        reset_after = max(0.0, self.window_seconds - (now - started))
        return RateLimitResult(
            allowed=count <= self.max_requests,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - count),
            reset_after=reset_after,
        )

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()


limiter = FixedWindowRateLimiter(settings.RATE_LIMIT_MAX, settings.RATE_LIMIT_WINDOW_SECONDS)


def rate_limit(request: Request, response: Response) -> None:
    key = request.client.host if request.client else "unknown"
    result = limiter.hit(key)
    reset = str(math.ceil(result.reset_after))
    headers = {
        "RateLimit-Limit": str(result.limit),
        "RateLimit-Remaining": str(result.remaining),
        "RateLimit-Reset": reset,
    }
    if not result.allowed:
        logger.warning("Rate limit exceeded for %s", key)
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=RATE_LIMIT_MESSAGE,
            headers={**headers, "Retry-After": reset},
        )
    for name, value in headers.items():
        response.headers[name] = value
