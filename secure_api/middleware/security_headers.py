"""Protective response headers applied to every response."""

from __future__ import annotations

from typing import Mapping, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

DEFAULT_SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}

# Headers that advertise the server stack.
REMOVED_HEADERS = ("X-Powered-By", "Server")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Annotate each outgoing response with the security header bundle."""

    def __init__(
        self,
        app: ASGIApp,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(app)
        self.headers = {**DEFAULT_SECURITY_HEADERS, **(headers or {})}

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        response = await call_next(request)
        return apply_security_headers(response, self.headers)


def apply_security_headers(
    response: Response,
    headers: Mapping[str, str] = DEFAULT_SECURITY_HEADERS,
) -> Response:
    """Set the security header bundle on ``response`` and return it."""

    for name in REMOVED_HEADERS:
        if name in response.headers:
            del response.headers[name]
    for name, value in headers.items():
        response.headers[name] = value
    return response
