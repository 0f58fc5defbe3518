"""Base error class for the route registry.

Registry errors carry the same shape as the rest of the codebase's errors
(machine-readable code, human-readable message, optional details) but are
raised: declaration problems must stop the application at startup and
request errors travel up the request pipeline to the error mapping step.
"""

from route_registry.core.enums import ErrorCode


class RouteRegistryError(Exception):
    """Base registry error.

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    def __init__(
        self,
        *,
        code: ErrorCode,
        message: str,
        details: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        """String representation of error (message only, shown to clients)."""
        return self.message
