"""API middleware."""

from showvote.api.middleware.logging_middleware import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
