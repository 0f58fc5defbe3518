"""Error channel that logs request errors."""

from route_registry.core.container import get_logger
from route_registry.domain.protocols import LoggerProtocol, RequestContextProtocol


class LoggingErrorChannel:
    """Logs every request error with its mapped status.

    Args:
        logger: Structured logger (defaults to the application logger).
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        self._logger = logger or get_logger()

    def emit(self, error: Exception, ctx: RequestContextProtocol) -> None:
        self._logger.error(
            "Request failed",
            error=error,
            method=ctx.method,
            path=ctx.path,
            status=ctx.status,
        )
