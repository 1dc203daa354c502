"""Pydantic schemas related to authentication."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr


class LoginRequest(BaseModel):
    """Credentials submitted to the login endpoint.

    ``login`` is recorded as received; ``password`` must be a string so its
    length can be masked.
    """

    login: Any = None
    password: StrictStr

    model_config = ConfigDict(extra="ignore")


class LoginResponse(BaseModel):
    """Acknowledgement returned for every accepted login attempt."""

    message: str


__all__ = ["LoginRequest", "LoginResponse"]
