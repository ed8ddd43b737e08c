"""JSON HTTP API with per-client token-bucket rate limiting and header middleware."""

__version__ = "0.1.0"
__all__ = ["app", "handlers", "headers", "main", "ratelimiter"]