"""Request handlers for the API endpoints."""

from __future__ import annotations

from datetime import datetime


def ping() -> dict[str, str]:
    """Answer a liveness check."""
    return {"message": "pong"}


def current_time() -> dict[str, str]:
    """Report the server's local time in RFC 3339 form."""
    stamp = datetime.now().astimezone().isoformat(timespec="seconds")
    if stamp.endswith("+00:00"):
        stamp = stamp[: -len("+00:00")] + "Z"
    return {"server_time": stamp}