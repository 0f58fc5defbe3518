"""Test doubles shared by unit and API tests."""

from typing import Any

from starlette.requests import Request

from route_registry.infrastructure.http.context import RequestContext


class RecordingRouter:
    """RouterProtocol double recording registrations and middleware."""

    def __init__(self) -> None:
        self.handlers: dict[tuple[str, str], Any] = {}
        self.middleware: list[Any] = []

    def register(self, method: str, path: str, handler: Any) -> None:
        self.handlers[(method, path)] = handler

    def use(self, middleware: Any) -> None:
        self.middleware.append(middleware)

    def routes(self) -> dict[tuple[str, str], Any]:
        return self.handlers


class InMemoryCollection:
    """CollectionProtocol implementation over a list of dicts."""

    def __init__(self, records: list[dict[str, Any]] | None = None) -> None:
        self.records = [dict(record) for record in records or []]
        self.queries: list[dict[str, Any]] = []

    def _matches(self, record: dict[str, Any], where: dict[str, Any]) -> bool:
        return all(str(record.get(key)) == str(value) for key, value in where.items())

    async def query(self, criteria: dict[str, Any]) -> list[dict[str, Any]]:
        self.queries.append(criteria)
        return [r for r in self.records if self._matches(r, criteria["where"])]

    async def fetch(self, criteria: dict[str, Any]) -> list[dict[str, Any]]:
        return [r for r in self.records if self._matches(r, criteria["where"])]

    async def create(self, record: dict[str, Any]) -> dict[str, Any]:
        self.records.append(dict(record))
        return dict(record)

    async def update(
        self, record: dict[str, Any], criteria: dict[str, Any]
    ) -> dict[str, Any] | None:
        for stored in self.records:
            if self._matches(stored, criteria["where"]):
                stored.update(record)
                return dict(stored)
        return None

    async def destroy(self, criteria: dict[str, Any]) -> None:
        self.records = [r for r in self.records if not self._matches(r, criteria["where"])]


def make_context(
    method: str = "GET",
    path: str = "/pets",
    *,
    query: str = "",
    path_params: dict[str, str] | None = None,
    body: bytes = b"",
) -> RequestContext:
    """Build a RequestContext without a running server."""
    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "query_string": query.encode(),
        "headers": [],
        "path_params": path_params or {},
    }

    async def receive() -> dict[str, Any]:
        return {"type": "http.request", "body": body, "more_body": False}

    return RequestContext(Request(scope, receive))
