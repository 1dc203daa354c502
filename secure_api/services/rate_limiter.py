"""Per-client request throttling built on slowapi.

One application-wide limit is shared by every route: each client address
gets a fixed window opened by its first request, counted in slowapi's
in-memory storage.
"""

from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from secure_api.config.settings import RateLimitConfig

MEMORY_STORAGE_URI = "memory://"


def rate_limit_expression(config: RateLimitConfig) -> str:
    """Return the limit in slowapi notation, e.g. ``100/180 seconds``."""

    return f"{config.max_requests}/{config.window_seconds} seconds"


def create_limiter(config: RateLimitConfig) -> Limiter:
    """Build the limiter enforcing ``config`` across all routes."""

    return Limiter(
        key_func=get_remote_address,
        application_limits=[rate_limit_expression(config)],
        headers_enabled=True,
        strategy="fixed-window",
        storage_uri=MEMORY_STORAGE_URI,
    )


__all__ = ["MEMORY_STORAGE_URI", "create_limiter", "rate_limit_expression"]
