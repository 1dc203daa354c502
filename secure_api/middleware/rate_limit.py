"""Rejection response for clients over their rate limit."""

from __future__ import annotations

from fastapi import Request, status
from slowapi.errors import RateLimitExceeded
from starlette.responses import PlainTextResponse, Response


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Answer 429 with the configured plain-text message.

    Kept synchronous: ``SlowAPIMiddleware`` calls it directly.
    """

    response = PlainTextResponse(
        request.app.state.settings.rate_limit.message,
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
    )
    limiter = request.app.state.limiter
    return limiter._inject_headers(response, request.state.view_rate_limit)
