"""Per-request context.

Wraps the Starlette request and collects the response (status and body)
while middleware and the handler run. Assigning a body when no status has
been chosen yet sets status 200; a context that never receives a body is
rendered as 404 unless a status was set explicitly.
"""

from collections.abc import Mapping
from typing import Any

from starlette.requests import Request

from route_registry.core.errors import HTTPError


class RequestContext:
    """Request data plus the response being built.

    Attributes:
        request: Underlying Starlette request
        method: Upper-case HTTP method
        path: Request path
        params: Path parameters
        query: Query parameters
        headers: Request headers
        state: Request-scoped state (``request.state``)
        status: Response status, None until set
        response_headers: Extra response headers
    """

    def __init__(self, request: Request) -> None:
        self.request = request
        self.method = request.method
        self.path = request.url.path
        self.params: Mapping[str, Any] = dict(request.path_params)
        self.query: Mapping[str, str] = request.query_params
        self.headers: Mapping[str, str] = request.headers
        self.state = request.state
        self.status: int | None = None
        self.response_headers: dict[str, str] = {}
        self._body: Any = None
        self._has_body = False

    @property
    def body(self) -> Any:
        return self._body

    @body.setter
    def body(self, value: Any) -> None:
        self._body = value
        self._has_body = value is not None
        if self._has_body and self.status is None:
            self.status = 200

    @property
    def has_body(self) -> bool:
        return self._has_body

    def throw(self, status: int, message: str | None = None) -> None:
        """Abort the request with an HTTP error.

        Raises:
            HTTPError: Always.
        """
        raise HTTPError(status, message)
