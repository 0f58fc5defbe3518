"""Application-level error channel.

Every error raised while handling a request is emitted here after it has
been mapped to a response, whether or not a catch rule matched.
"""

from typing import Protocol

from route_registry.domain.protocols.router_protocol import RequestContextProtocol


class ErrorChannelProtocol(Protocol):
    """Protocol for error observability sinks."""

    def emit(self, error: Exception, ctx: RequestContextProtocol) -> None:
        """Report an error raised while handling ``ctx``.

        Args:
            error: The exception raised by the pipeline.
            ctx: Request context, already carrying the mapped status/body.
        """
        ...
