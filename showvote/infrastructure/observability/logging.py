"""structlog setup for the API process.

Production writes one JSON object per line:

    {"event": "vote_recorded", "level": "info", "timestamp": "...",
     "service": "VotingService", "component": "voting",
     "operation": "submit_vote", "correlation_id": "...", "show_id": "..."}

Other environments get the console renderer; test runs drop the colours
so captured output stays readable.
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from showvote.infrastructure.observability.correlation import add_correlation_id

LOG_LEVEL_ENV = "LOG_LEVEL"


def _level_from_env() -> int:
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _renderer(environment: str) -> Processor:
    if environment == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=environment != "test")


def configure_structlog(environment: str = "production") -> None:
    """Install the processor chain; call once per process."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        cast(Processor, add_correlation_id),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        _renderer(environment),
    ]
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_from_env()),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
