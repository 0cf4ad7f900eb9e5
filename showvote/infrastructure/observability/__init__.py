"""Structured logging and request correlation for Show Vote."""

from showvote.infrastructure.observability.correlation import (
    CORRELATION_HEADER,
    add_correlation_id,
    correlation_from_headers,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from showvote.infrastructure.observability.logging import configure_structlog

__all__: list[str] = [
    "CORRELATION_HEADER",
    "add_correlation_id",
    "configure_structlog",
    "correlation_from_headers",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
]
