"""Dispatch collaborator ("router") contract.

The registry calls ``register`` once per declared method + path, adds
application middleware through ``use`` and hands ``routes()`` to the
server. Paths are passed in ``/pets/:id`` token form; adapters translate
them to their own placeholder syntax.

Handlers receive ``(ctx, state)``. Middleware receives ``(ctx, call_next)``
and must await ``call_next()`` to continue the chain.
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol

Handler = Callable[[Any, Any], Any]
Middleware = Callable[[Any, Callable[[], Awaitable[None]]], Any]


class RequestContextProtocol(Protocol):
    """Per-request context handed to middleware, hooks and handlers."""

    method: str
    path: str
    params: Mapping[str, str]
    query: Mapping[str, str]
    headers: Mapping[str, str]
    state: Any
    status: int | None
    body: Any

    @property
    def has_body(self) -> bool:
        """True once a handler assigned a response body."""
        ...

    def throw(self, status: int, message: str | None = None) -> None:
        """Raise an HTTPError with ``status``."""
        ...


class RouterProtocol(Protocol):
    """Protocol for HTTP routers."""

    def register(self, method: str, path: str, handler: Handler) -> None:
        """Bind ``handler`` to ``method`` + ``path``."""
        ...

    def use(self, middleware: Middleware) -> None:
        """Append middleware run before every route handler."""
        ...

    def routes(self) -> Any:
        """Return the composed, servable handler set (e.g. an ASGI app)."""
        ...
