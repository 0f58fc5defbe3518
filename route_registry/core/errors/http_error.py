"""HTTP error raised by handlers, middleware and authorization hooks.

``HTTPError(403)`` raised by an authorization hook is the signal the
document filter uses to hide a route from a requester.

Usage:
    from route_registry.core.errors import HTTPError

    raise HTTPError(404)
    raise HTTPError(403, "Admins only")
"""

from http import HTTPStatus

from route_registry.core.enums import ErrorCode
from route_registry.core.errors.base_error import RouteRegistryError


class HTTPError(RouteRegistryError):
    """Error carrying an HTTP status code.

    Attributes:
        status: HTTP status code sent to the client.
        message: Defaults to the status reason phrase.
    """

    def __init__(
        self,
        status: int,
        message: str | None = None,
        *,
        code: ErrorCode = ErrorCode.HTTP_ERROR,
        details: dict[str, str] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message or _reason_phrase(status),
            details=details,
        )
        self.status = status

    def __repr__(self) -> str:
        return f"HTTPError(status={self.status}, message={self.message!r})"


def _reason_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Error"


def error_status(error: BaseException, default: int = 500) -> int:
    """HTTP status carried by ``error``.

    Reads ``status`` (HTTPError) or ``status_code`` (Starlette/FastAPI
    ``HTTPException``), falling back to ``default``.
    """
    for attribute in ("status", "status_code"):
        status = getattr(error, attribute, None)
        if isinstance(status, int):
            return status
    return default
