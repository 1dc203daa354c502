"""Helpers for keeping credentials out of the logs."""

from __future__ import annotations

MASK_CHARACTER = "*"


def mask_secret(value: str, mask: str = MASK_CHARACTER) -> str:
    """Return ``mask`` repeated once per character of ``value``."""

    return mask * len(value)
