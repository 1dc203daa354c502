"""Request logging middleware."""

from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from secure_api.services.event_log import EventLogger
from secure_api.utils import client_address


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Write one record per incoming request before it reaches a route."""

    def __init__(self, app: ASGIApp, event_logger: EventLogger) -> None:
        super().__init__(app)
        self.event_logger = event_logger

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        self.event_logger.info(self.format_message(request))
        return await call_next(request)

    @staticmethod
    def format_message(request: Request) -> str:
        """Return the request line summary for ``request``."""

        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        return f"Requête recue : {request.method} {target} - IP : {client_address(request)}"
