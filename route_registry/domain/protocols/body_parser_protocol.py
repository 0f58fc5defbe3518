"""Body-parsing collaborator contract.

Called by the request pipeline only for routes that declare a
``body``-located parameter. The parsed body is stored as ``state.body``.
"""

from typing import Any, Protocol

from route_registry.domain.protocols.router_protocol import RequestContextProtocol


class BodyParserProtocol(Protocol):
    """Protocol for request body parsers."""

    async def parse(self, ctx: RequestContextProtocol) -> Any:
        """Parse the request body.

        Args:
            ctx: Request context.

        Returns:
            Any: Parsed body (None when the request carries no body).

        Raises:
            HTTPError: 400 when the body cannot be parsed.
        """
        ...
