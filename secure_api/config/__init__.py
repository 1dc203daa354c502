"""Application configuration."""

from .settings import RateLimitConfig, Settings, settings

__all__ = ["RateLimitConfig", "Settings", "settings"]
