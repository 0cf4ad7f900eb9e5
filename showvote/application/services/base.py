"""Logging support shared by the application services."""

import structlog


class LoggingMixin:
    """Binds a structlog logger to the concrete service.

    Call _init_logger() from __init__, then take a per-call logger from
    _log_operation(). Events carry the service and operation names; the
    correlation id is added by the logging processor chain.

        log = self._log_operation("submit_vote", user_id=user_id)
        log.info("vote_recorded", show_id=str(vote.show_id))
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str) -> None:
        self._log = structlog.get_logger().bind(
            service=type(self).__name__,
            component=component,
        )

    def _log_operation(self, operation: str, **context: object) -> structlog.BoundLogger:
        return self._log.bind(operation=operation, **context)
