# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections import defaultdict, deque
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from threading import Lock

from flask import Flask, Request, current_app, jsonify, request

from board.shared.config.settings import SecurityConfig
from board.shared.logging import logger

RATE_LIMITERS_KEY = "board.rate_limiters"


@dataclass
class Bucket:
    timestamps: deque[float]


class InMemoryRateLimiter:
    def __init__(self, limit: int, window_seconds: float) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._buckets: dict[str, Bucket] = defaultdict(lambda: Bucket(deque(maxlen=self._limit)))
        self._lock = Lock()

    def allow(self, key: str) -> bool:
        now = time.monotonic()
        with self._lock:
            bucket = self._buckets[key]
            # Drop old
            while bucket.timestamps and (now - bucket.timestamps[0]) > self._window:
                bucket.timestamps.popleft()
            if len(bucket.timestamps) >= self._limit:
                return False
            bucket.timestamps.append(now)
            return True


def configure_rate_limiting(app: Flask, security: SecurityConfig) -> None:
    app.config.update(
        RATE_LIMIT_ENABLED=security.enable_rate_limit,
        RATE_LIMIT_REQUESTS=security.rate_limit_requests,
        RATE_LIMIT_WINDOW=security.rate_limit_window,
    )
    app.extensions[RATE_LIMITERS_KEY] = {}


def _client_key(req: Request) -> str:
    forwarded = req.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return forwarded or (req.remote_addr or "unknown")


def _limiter_for(
    scope: str, limit: int | None, window_seconds: float | None
) -> InMemoryRateLimiter:
    limiters: dict[str, InMemoryRateLimiter] = current_app.extensions.setdefault(
        RATE_LIMITERS_KEY, {}
    )
    limiter = limiters.get(scope)
    if limiter is None:
        limiter = limiters.setdefault(
            scope,
            InMemoryRateLimiter(
                limit or current_app.config.get("RATE_LIMIT_REQUESTS", 10),
                window_seconds or current_app.config.get("RATE_LIMIT_WINDOW", 60.0),
            ),
        )
    return limiter


def rate_limit(limit: int | None = None, window_seconds: float | None = None):
    """Throttle a view per client address, using the limits of the running app."""

    def decorator(f: Callable):
        scope = f.__qualname__

        @wraps(f)
        def wrapper(*args, **kwargs):
            if not current_app.config.get("RATE_LIMIT_ENABLED", False):
                return f(*args, **kwargs)

            key = f"{request.path}:{_client_key(request)}"
            if not _limiter_for(scope, limit, window_seconds).allow(key):
                logger.warning(f"rate_limit: rejected {request.method} {request.path} key={key}")
                return jsonify({"error": "rate_limited"}), 429
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["InMemoryRateLimiter", "configure_rate_limiting", "rate_limit"]
