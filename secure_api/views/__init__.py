"""Pydantic schemas used as views in the MVC architecture."""

from .auth import LoginRequest, LoginResponse
from .common import ValidationErrorResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "ValidationErrorResponse",
]
