"""Persistence collaborator used by register_resource().

Any entity store (SQL table gateway, document collection, in-memory dict)
can back a standard resource as long as it implements these coroutines.
Criteria follow the ``{"where": {...}}`` shape; further keys (order,
limit, offset) are passed through untouched.
"""

from typing import Any, Protocol


class CollectionProtocol(Protocol):
    """Protocol for entity collections."""

    async def query(self, criteria: dict[str, Any]) -> list[dict[str, Any]]:
        """Return records matching criteria (list endpoint)."""
        ...

    async def fetch(self, criteria: dict[str, Any]) -> list[dict[str, Any]]:
        """Return records matching a primary-key criteria."""
        ...

    async def create(self, record: dict[str, Any]) -> dict[str, Any]:
        """Insert a record and return it as stored."""
        ...

    async def update(
        self, record: dict[str, Any], criteria: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Update the matching record; None when nothing matched."""
        ...

    async def destroy(self, criteria: dict[str, Any]) -> None:
        """Delete matching records."""
        ...
