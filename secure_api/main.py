"""Application entry point and FastAPI app factory."""

from __future__ import annotations

from typing import Any, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from .config.settings import Settings, settings as default_settings
from .controllers import auth, home
from .middleware import (
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
    apply_security_headers,
    rate_limit_exceeded_handler,
)
from .services.event_log import EventLogger
from .services.rate_limiter import create_limiter
from .utils import client_address

INVALID_REQUEST_MESSAGE = "Requête invalide"


def _invalid_fields(errors: list[dict[str, Any]]) -> list[str]:
    """Return the dotted body paths named by pydantic validation errors."""

    fields: list[str] = []
    for error in errors:
        parts = [
            str(part)
            for part in error.get("loc", ())
            if part != "body" and not isinstance(part, int)
        ]
        name = ".".join(parts) or "body"
        if name not in fields:
            fields.append(name)
    return fields


def create_app(
    app_settings: Optional[Settings] = None,
    *,
    limiter: Optional[Limiter] = None,
    event_logger: Optional[EventLogger] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The log directory is created here, before any listener binds; an
    ``OSError`` from that step aborts startup.
    """

    config = app_settings or default_settings

    if event_logger is None:
        event_logger = EventLogger.open(config.log_directory, level=config.log_level)

    if limiter is None:
        limiter = create_limiter(config.rate_limit)

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        debug=config.debug,
        description="Minimal API with rate limiting, security headers and audit logs",
    )
    app.state.settings = config
    app.state.event_logger = event_logger
    app.state.limiter = limiter

    # Starlette runs the last registered middleware first.
    app.add_middleware(RequestLoggingMiddleware, event_logger=event_logger)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(home.router)
    app.include_router(auth.router)

    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        event_logger.error(
            f"{INVALID_REQUEST_MESSAGE} sur {request.url.path} - IP: {client_address(request)}"
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": INVALID_REQUEST_MESSAGE,
                "fields": _invalid_fields(list(exc.errors())),
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        event_logger.error(
            f"Erreur interne sur {request.method} {request.url.path} "
            f"- IP: {client_address(request)} - {exc!r}"
        )
        # Runs outside the user middleware stack, so headers are set here.
        response = JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
        return apply_security_headers(response)

    @app.on_event("startup")
    async def startup_event() -> None:
        event_logger.info(f"Le serveur est lancé sur le port {config.port}")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        event_logger.close()

    return app


def run() -> None:
    """Serve the application with uvicorn using the environment settings."""

    uvicorn.run(
        create_app(default_settings),
        host=default_settings.host,
        port=default_settings.port,
        server_header=False,
    )


if __name__ == "__main__":
    run()
