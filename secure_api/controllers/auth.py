"""Login endpoint; every well-formed attempt is accepted and audited."""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter

from secure_api.controllers.dependencies import ClientAddressDep, EventLoggerDep
from secure_api.utils import mask_secret
from secure_api.views import LoginRequest, LoginResponse, ValidationErrorResponse

router = APIRouter(tags=["auth"])

LOGIN_SUCCESS_MESSAGE = "Connexion réussie"


def _display_login(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ValidationErrorResponse}},
)
async def login(
    payload: LoginRequest,
    event_logger: EventLoggerDep,
    client: ClientAddressDep,
) -> LoginResponse:
    """Record the attempt with a masked password and acknowledge it."""

    masked = mask_secret(payload.password)
    event_logger.info(
        f"Tentative de connexion - Login: {_display_login(payload.login)}, "
        f"Password: {masked} - IP: {client}"
    )
    return LoginResponse(message=LOGIN_SUCCESS_MESSAGE)
