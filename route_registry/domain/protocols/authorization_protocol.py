"""Authorization hook contract.

The authorization hook is optional and request-scoped: middleware installs
it as ``state.authorize``. The registry calls it before every handler and
the document filter calls it once per path/method pair to decide which
routes a requester may see.

A hook denies access by raising ``HTTPError(403)``. Any other exception is
a genuine failure and propagates.

Usage:
    async def authorize(ctx, state, request: AuthorizationRequest) -> None:
        if request.spec.is_public:
            return
        if not state.user.admin:
            raise HTTPError(403)

    async def middleware(ctx, call_next):
        ctx.state.authorize = authorize
        await call_next()
"""

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationRequest:
    """What is being accessed.

    Attributes:
        method: Upper-case HTTP method (e.g., "GET")
        resource: Base-path prefix + document path (e.g., "/api/pets/{id}")
        spec: The route's MethodSpec (tags, parameters, responses, security)
    """

    method: str
    resource: str
    spec: Any


class AuthorizeHook(Protocol):
    """Request-scoped authorization hook (sync, async or generator style)."""

    def __call__(
        self, ctx: Any, state: Any, request: AuthorizationRequest, /
    ) -> Awaitable[None] | None: ...


class AuthorizeCheck(Protocol):
    """Authorization hook bound to one request's context and state."""

    def __call__(self, request: AuthorizationRequest, /) -> Awaitable[None] | None: ...
