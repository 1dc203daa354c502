"""Utility helpers for the secure API."""

from .client import UNKNOWN_CLIENT, client_address
from .security import MASK_CHARACTER, mask_secret

__all__ = ["MASK_CHARACTER", "UNKNOWN_CLIENT", "client_address", "mask_secret"]
