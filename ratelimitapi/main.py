"""Command-line entry point that starts the API server."""

from __future__ import annotations

import argparse
import os

from ratelimitapi.app import create_app

REQUIRED_VARIABLES = ("ENV", "PORT", "IS_SSL", "API_VERSION")


def main(argv: list[str] | None = None) -> int:
    """Start the server configured by ENV, PORT, IS_SSL and API_VERSION."""
    parser = argparse.ArgumentParser(
        prog="ratelimitapi",
        description="Rate-limited JSON API server, configured through the environment.",
    )
    parser.parse_args(argv)

    settings = {name: os.environ.get(name, "") for name in REQUIRED_VARIABLES}
    if not all(settings.values()):
        print("Environment variables ENV, PORT, IS_SSL, and API_VERSION must be set.")
        print("Example: ENV=DEVELOPMENT PORT=8080 IS_SSL=FALSE API_VERSION=v1")
        return 1

    debug = settings["ENV"] != "PRODUCTION"
    app = create_app()
    try:
        app.run(
            host="0.0.0.0",
            port=int(settings["PORT"]),
            debug=debug,
            use_reloader=False,
        )
    except (OSError, ValueError) as error:
        print(f"Failed to start server: {error}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())