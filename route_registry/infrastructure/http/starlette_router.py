"""Starlette implementation of the router collaborator.

Each registered handler becomes a ``starlette.routing.Route``. For every
request a RequestContext is created, the ``use()`` middleware chain runs
around the handler (each middleware awaits ``call_next()`` to continue),
and the context is rendered into a Starlette response:

    dict / list / other JSON-able  -> JSONResponse
    str                            -> PlainTextResponse
    bytes                          -> Response
    no body                        -> status phrase as text (404 if no status)
    204 / 304                      -> empty response

An ``HTTPError`` escaping the middleware chain is rendered as its status
with the message as text.

Usage:
    router = StarletteRouter()
    router.use(load_user)
    router.register("GET", "/pets/:id", show_pet)
    app = router.routes()
"""

import re
from collections.abc import Awaitable, Callable
from http import HTTPStatus
from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from route_registry.core.errors import HTTPError
from route_registry.core.invocation import call
from route_registry.domain.protocols import Handler, Middleware
from route_registry.infrastructure.http.context import RequestContext

PATH_TOKEN = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")
EMPTY_STATUSES = frozenset({204, 304})
NOT_FOUND = 404


def to_starlette_path(path: str) -> str:
    """``/pets/:id`` -> ``/pets/{id}``."""
    return PATH_TOKEN.sub(r"{\1}", path)


class StarletteRouter:
    """RouterProtocol adapter over Starlette routing.

    Args:
        debug: Passed to the Starlette application.
    """

    def __init__(self, *, debug: bool = False) -> None:
        self._debug = debug
        self._routes: list[Route] = []
        self._middleware: list[Middleware] = []

    def register(self, method: str, path: str, handler: Handler) -> None:
        self._routes.append(
            Route(
                to_starlette_path(path),
                endpoint=self._endpoint(handler),
                methods=[method.upper()],
            )
        )

    def use(self, middleware: Middleware) -> None:
        self._middleware.append(middleware)

    def routes(self) -> Starlette:
        return Starlette(debug=self._debug, routes=list(self._routes))

    def _endpoint(self, handler: Handler) -> Callable[[Request], Awaitable[Response]]:
        async def endpoint(request: Request) -> Response:
            ctx = RequestContext(request)
            try:
                await self._run(ctx, handler)
            except HTTPError as error:
                ctx.status = error.status
                ctx.body = error.message
            return render(ctx)

        return endpoint

    async def _run(self, ctx: RequestContext, handler: Handler) -> None:
        middleware = self._middleware

        async def dispatch(index: int) -> None:
            if index < len(middleware):
                await call(middleware[index], ctx, lambda: dispatch(index + 1))
            else:
                await call(handler, ctx, ctx.state)

        await dispatch(0)


def render(ctx: RequestContext) -> Response:
    """Turn the collected status and body into a Starlette response."""
    status = ctx.status or NOT_FOUND
    headers = ctx.response_headers or None
    if status in EMPTY_STATUSES:
        return Response(status_code=status, headers=headers)
    if not ctx.has_body:
        return PlainTextResponse(_phrase(status), status_code=status, headers=headers)

    body: Any = ctx.body
    if isinstance(body, bytes):
        return Response(body, status_code=status, headers=headers)
    if isinstance(body, str):
        return PlainTextResponse(body, status_code=status, headers=headers)
    return JSONResponse(jsonable_encoder(body), status_code=status, headers=headers)


def _phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return str(status)
