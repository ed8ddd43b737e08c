"""Security, CORS and content-type middleware for Flask applications."""

from __future__ import annotations

from flask import Flask, request

SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains; preload",
    "Referrer-Policy": "no-referrer",
    "Permissions-Policy": "geolocation=(self), microphone=()",
}

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "http://localhost",
    "Access-Control-Max-Age": "86400",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS, PUT, DELETE, UPDATE",
    "Access-Control-Allow-Headers": (
        "X-Requested-With, Content-Type, Origin, Authorization, Accept, "
        "Client-Security-Token, Accept-Encoding, x-access-token"
    ),
    "Access-Control-Expose-Headers": "Content-Length",
    "Access-Control-Allow-Credentials": "true",
}

JSON_CONTENT_TYPE = "application/json"
BODY_METHODS = frozenset({"POST", "PUT"})

UNSUPPORTED_MEDIA_TYPE = {
    "error": "Unsupported Media Type",
    "message": "Content-Type must be application/json",
}


def security_headers() -> dict[str, str]:
    """Return the security headers set on every response."""
    return dict(SECURITY_HEADERS)


def cors_headers() -> dict[str, str]:
    """Return the CORS headers set on every response."""
    return dict(CORS_HEADERS)


def is_preflight(method: str) -> bool:
    """Tell whether a request method is a CORS preflight."""
    return method == "OPTIONS"


def content_type_allowed(method: str, content_type: str | None) -> bool:
    """Tell whether a request's content type is acceptable for its method."""
    if method not in BODY_METHODS:
        return True
    return (content_type or "").startswith(JSON_CONTENT_TYPE)


def install_header_middleware(app: Flask) -> None:
    """Answer preflights, enforce JSON bodies and add headers to every response."""

    @app.before_request
    def _screen_request():
        if is_preflight(request.method):
            return "", 204
        if not content_type_allowed(request.method, request.headers.get("Content-Type")):
            return dict(UNSUPPORTED_MEDIA_TYPE), 415
        return None

    @app.after_request
    def _add_headers(response):
        for name, value in {**security_headers(), **cors_headers()}.items():
            response.headers[name] = value
        return response