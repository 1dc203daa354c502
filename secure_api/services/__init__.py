"""Service layer components shared by the middleware and controllers."""

from .event_log import EventLogger, LogLevel
from .rate_limiter import create_limiter, rate_limit_expression

__all__ = [
    "EventLogger",
    "LogLevel",
    "create_limiter",
    "rate_limit_expression",
]
