"""
Fixed-window rate limiter backends.

The in-memory backend only sees the traffic of its own process, so it is
suitable for a single instance (and tests). The Redis backend shares
counters across instances.
"""

import logging
import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Dict

import redis
from redis import Redis
from redis.exceptions import RedisError

from src.app.services.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


@dataclass
class _Window:
    count: int
    reset_at: float


class InMemoryRateLimiter(RateLimiter):
    """
    Fixed window per key: the first request opens a window of
    ``window_seconds``; at most ``max_requests`` are allowed until it closes.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        purge_interval_seconds: float = 60,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_requests = max_requests
        self._window = window_seconds
        self._purge_interval = purge_interval_seconds
        self._clock = clock
        self._windows: Dict[str, _Window] = {}
        self._lock = Lock()
        self._next_purge = clock() + purge_interval_seconds

    def allow(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            if now >= self._next_purge:
                self._purge(now)

            window = self._windows.get(key)
            if window is None or now >= window.reset_at:
                self._windows[key] = _Window(count=1, reset_at=now + self._window)
                return True

            if window.count >= self._max_requests:
                return False

            window.count += 1
            return True

    def __len__(self) -> int:
        return len(self._windows)

    def _purge(self, now: float) -> None:
        """Drop windows that have closed. Caller holds the lock."""
        stale = [key for key, window in self._windows.items() if now >= window.reset_at]
        for key in stale:
            del self._windows[key]
        self._next_purge = now + self._purge_interval


class RedisRateLimiter(RateLimiter):
    """Fixed-window limiter shared across processes through Redis counters"""

    def __init__(
        self,
        client: Redis,
        *,
        max_requests: int,
        window_seconds: float,
        key_prefix: str = "rate",
    ) -> None:
        self._client = client
        self._max_requests = max_requests
        self._window_ms = int(window_seconds * 1000)
        self._key_prefix = key_prefix

    def allow(self, key: str) -> bool:
        """Count a hit for ``key``; lets the request through if Redis is down"""
        redis_key = f"{self._key_prefix}:{key}"
        try:
            count = self._client.incr(redis_key)
            # -1: key exists without expiry (first hit, or a crash between INCR and PEXPIRE)
            if count == 1 or self._client.pttl(redis_key) == -1:
                self._client.pexpire(redis_key, self._window_ms)
        except RedisError as exc:
            logger.warning(f"Rate limiter '{self._key_prefix}' skipped, redis error: {exc}")
            return True
        return count <= self._max_requests


def build_rate_limiter(
    ApplicationConfig, max_requests: int, window_seconds: float, key_prefix: str = "rate"
) -> RateLimiter:
    """Instantiate the configured backend, falling back to memory when Redis is unreachable"""
    if ApplicationConfig.RATE_LIMIT_BACKEND == "redis" and ApplicationConfig.REDIS_URL:
        try:
            client = redis.from_url(ApplicationConfig.REDIS_URL)
            client.ping()
            logger.info(f"Rate limiter '{key_prefix}' using redis backend")
            return RedisRateLimiter(
                client,
                max_requests=max_requests,
                window_seconds=window_seconds,
                key_prefix=key_prefix,
            )
        except RedisError as exc:
            logger.warning(f"Redis rate limiter unavailable, falling back to in-memory: {exc}")

    return InMemoryRateLimiter(
        max_requests=max_requests,
        window_seconds=window_seconds,
        purge_interval_seconds=ApplicationConfig.RATE_LIMIT_PURGE_INTERVAL_SECONDS,
    )
