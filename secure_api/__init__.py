"""Minimal HTTP API with rate limiting, security headers and audit logs."""

__version__ = "1.0.0"
