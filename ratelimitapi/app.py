"""Application factory wiring middleware, routes and error handlers."""

from __future__ import annotations

import gzip

from flask import Flask, Response, request

from ratelimitapi import handlers
from ratelimitapi.headers import install_header_middleware
from ratelimitapi.ratelimiter import rate_limit

# One token every 5 seconds, bursts of 2, visitors forgotten after 10 seconds idle.
LIMIT_RATE = 1 / 5
LIMIT_BURST = 2
LIMIT_EXPIRE_AFTER = 10.0

NOT_FOUND = {
    "error": "Not Found",
    "message": "The requested resource could not be found",
}
METHOD_NOT_ALLOWED = {
    "error": "Method Not Allowed",
    "message": "The requested method is not allowed for this resource",
}


def _gzip_response(response: Response) -> Response:
    accepts = request.headers.get("Accept-Encoding", "")
    if (
        "gzip" not in accepts.lower()
        or response.direct_passthrough
        or response.status_code == 204
        or "Content-Encoding" in response.headers
    ):
        return response
    response.set_data(gzip.compress(response.get_data()))
    response.headers["Content-Encoding"] = "gzip"
    response.vary.add("Accept-Encoding")
    return response


def create_app() -> Flask:
    """Build the API application."""
    app = Flask(__name__)
    app.after_request(_gzip_response)
    install_header_middleware(app)

    app.add_url_rule(
        "/api/ping",
        "ping",
        rate_limit(LIMIT_RATE, LIMIT_BURST, LIMIT_EXPIRE_AFTER)(handlers.ping),
        methods=["GET"],
    )
    app.add_url_rule(
        "/api/time",
        "time",
        rate_limit(LIMIT_RATE, LIMIT_BURST, LIMIT_EXPIRE_AFTER)(handlers.current_time),
        methods=["GET"],
    )

    app.register_error_handler(404, lambda _error: (dict(NOT_FOUND), 404))
    app.register_error_handler(405, lambda _error: (dict(METHOD_NOT_ALLOWED), 405))
    return app