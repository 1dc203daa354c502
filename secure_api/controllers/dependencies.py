"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from secure_api.services.event_log import EventLogger
from secure_api.utils import client_address


def get_event_logger(request: Request) -> EventLogger:
    """Return the event logger owned by the running application."""

    return request.app.state.event_logger


def get_client_address(request: Request) -> str:
    return client_address(request)


EventLoggerDep = Annotated[EventLogger, Depends(get_event_logger)]
ClientAddressDep = Annotated[str, Depends(get_client_address)]


__all__ = [
    "ClientAddressDep",
    "EventLoggerDep",
    "get_client_address",
    "get_event_logger",
]
