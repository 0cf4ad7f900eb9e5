"""Per-request correlation ids.

The id of the request being served sits in a ContextVar, so any coroutine
running on behalf of that request logs with the same id. Clients may send
their own id in the X-Correlation-ID header; it is echoed back.
"""

from collections.abc import Mapping
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

CORRELATION_HEADER = "X-Correlation-ID"

_request_id: ContextVar[str] = ContextVar("showvote_request_id", default="")


def generate_correlation_id() -> str:
    return uuid4().hex


def correlation_from_headers(headers: Mapping[str, str]) -> str:
    """Adopt the caller's id, or mint one, and make it current."""
    correlation_id = headers.get(CORRELATION_HEADER) or generate_correlation_id()
    set_correlation_id(correlation_id)
    return correlation_id


def get_correlation_id() -> str:
    return _request_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _request_id.set(correlation_id)


def add_correlation_id(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: tag the event unless it already carries an id."""
    correlation_id = _request_id.get()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
