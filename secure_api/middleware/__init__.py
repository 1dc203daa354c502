"""Application middleware package."""

from .logging import RequestLoggingMiddleware
from .rate_limit import rate_limit_exceeded_handler
from .security_headers import (
    DEFAULT_SECURITY_HEADERS,
    SecurityHeadersMiddleware,
    apply_security_headers,
)

__all__ = [
    "DEFAULT_SECURITY_HEADERS",
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
    "apply_security_headers",
    "rate_limit_exceeded_handler",
]
