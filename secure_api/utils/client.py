"""Request helpers."""

from __future__ import annotations

from starlette.requests import Request

UNKNOWN_CLIENT = "unknown"


def client_address(request: Request) -> str:
    """Return the peer address of the connection.

    Forwarding headers are ignored; the socket peer is the client identity.
    """

    client = request.client
    if client is None or not client.host:
        return UNKNOWN_CLIENT
    return client.host
