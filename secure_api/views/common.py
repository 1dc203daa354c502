"""Common response schemas."""

from typing import List

from pydantic import BaseModel


class ValidationErrorResponse(BaseModel):
    detail: str
    fields: List[str] = []
