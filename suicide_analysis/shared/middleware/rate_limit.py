# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable
from functools import wraps
from threading import Lock

from flask import Request, request

from suicide_analysis.shared.errors import RateLimitedError
from suicide_analysis.shared.logging import logger


class InMemoryRateLimiter:
    """Sliding-window limiter keyed by route and client address.

    ``X-Forwarded-For`` is only honoured with ``trust_forwarded`` set, i.e. when
    the app runs behind a proxy that overwrites the header.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        *,
        trust_forwarded: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._trust_forwarded = trust_forwarded
        self._clock = clock
        self._lock = Lock()
        self._buckets: dict[str, deque[float]] = {}
        self._last_sweep = clock()

    @property
    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._buckets)

    def allow(self, key: str) -> bool:
        return self.retry_after(key) == 0.0

    def retry_after(self, key: str) -> float:
        """Record a hit for ``key``; return 0 when allowed, else seconds to wait."""
        now = self._clock()
        with self._lock:
            if now - self._last_sweep > self._window:
                self._sweep(now)
            bucket = self._buckets.setdefault(key, deque())
            while bucket and (now - bucket[0]) > self._window:
                bucket.popleft()
            if len(bucket) >= self._limit:
                return max(0.1, self._window - (now - bucket[0]))
            bucket.append(now)
            return 0.0

    def _sweep(self, now: float) -> None:
        # Caller holds the lock.
        stale = [k for k, b in self._buckets.items() if not b or (now - b[-1]) > self._window]
        for key in stale:
            del self._buckets[key]
        self._last_sweep = now

    def client_key(self, req: Request) -> str:
        if self._trust_forwarded:
            forwarded = req.headers.get("X-Forwarded-For", "").split(",")[0].strip()
            if forwarded:
                return forwarded
        return req.remote_addr or "unknown"


def rate_limit(limiter: InMemoryRateLimiter | None):
    def decorator(f: Callable):
        if limiter is None:
            return f

        @wraps(f)
        def wrapper(*args, **kwargs):
            key = f"{request.path}:{limiter.client_key(request)}"
            wait = limiter.retry_after(key)
            if wait:
                logger.warning(f"rate_limit: rejected {request.method} {request.path}")
                raise RateLimitedError(wait)
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]
