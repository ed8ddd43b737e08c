"""Per-visitor token-bucket rate limiting for Flask views."""

from __future__ import annotations

import functools
import threading
import time
from typing import Callable

from flask import request

Clock = Callable[[], float]

CLEANUP_INTERVAL = 60.0

TOO_MANY_REQUESTS = {
    "error": "Too Many Requests",
    "message": "You have exceeded the rate limit. Please try again later.",
}


class TokenBucket:
    """A token bucket that refills at `rate` tokens per second up to `burst`."""

    def __init__(self, rate: float, burst: int, clock: Clock | None = None) -> None:
        self.rate = float(rate)
        self.burst = burst
        self._clock = clock or time.monotonic
        self._tokens = float(burst)
        self._last = self._clock()
        self._lock = threading.Lock()

    def _advance(self, now: float) -> None:
        elapsed = max(0.0, now - self._last)
        self._tokens = min(float(self.burst), self._tokens + elapsed * self.rate)
        self._last = now

    def tokens(self) -> float:
        """Return the number of tokens currently available."""
        with self._lock:
            self._advance(self._clock())
            return self._tokens

    def allow(self) -> bool:
        """Consume one token if available; report whether the event may happen."""
        with self._lock:
            self._advance(self._clock())
            if self._tokens >= 1.0:
                self._tokens -= 1.0
                return True
            return False


class VisitorRegistry:
    """Keeps one token bucket per visitor key and forgets idle visitors."""

    def __init__(
        self,
        rate: float,
        burst: int,
        expire_after: float,
        clock: Clock | None = None,
    ) -> None:
        self.rate = rate
        self.burst = burst
        self.expire_after = expire_after
        self._clock = clock or time.monotonic
        self._buckets: dict[str, TokenBucket] = {}
        self._last_seen: dict[str, float] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> TokenBucket:
        """Return the bucket for `key`, creating it if needed, and mark it seen."""
        now = self._clock()
        with self._lock:
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = TokenBucket(self.rate, self.burst, self._clock)
                self._buckets[key] = bucket
            self._last_seen[key] = now
            return bucket

    def cleanup(self) -> list[str]:
        """Drop visitors idle for longer than `expire_after`; return their keys."""
        now = self._clock()
        with self._lock:
            expired = [
                key
                for key, seen in self._last_seen.items()
                if now - seen > self.expire_after
            ]
            for key in expired:
                del self._buckets[key]
                del self._last_seen[key]
        return expired

    def start_cleanup(self, interval: float = CLEANUP_INTERVAL) -> threading.Event:
        """Run `cleanup` every `interval` seconds in a daemon thread.

        Setting the returned event stops the thread.
        """
        stop = threading.Event()

        def run() -> None:
            while not stop.wait(interval):
                self.cleanup()

        threading.Thread(target=run, name="visitor-cleanup", daemon=True).start()
        return stop

    def __len__(self) -> int:
        with self._lock:
            return len(self._buckets)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._buckets


def visitor_key(ip: str, method: str, path: str) -> str:
    """Build the key that identifies a visitor of one endpoint."""
    return f"{ip}:{method}:{path}"


def rate_limit(rate: float, burst: int, expire_after: float):
    """Decorate a Flask view so each visitor is limited to `rate` requests per second.

    Visitors may burst up to `burst` requests; idle visitors are forgotten after
    `expire_after` seconds. Rejected requests get a 429 JSON response.
    """
    registry = VisitorRegistry(rate, burst, expire_after)
    registry.start_cleanup(CLEANUP_INTERVAL)

    def decorator(view):
        @functools.wraps(view)
        def wrapper(*args, **kwargs):
            key = visitor_key(request.remote_addr or "", request.method, request.path)
            if not registry.get(key).allow():
                return dict(TOO_MANY_REQUESTS), 429
            return view(*args, **kwargs)

        wrapper.registry = registry
        return wrapper

    return decorator