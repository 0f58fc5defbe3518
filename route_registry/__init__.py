"""Route registry with Swagger document synthesis and per-requester filtering.

Packages:
    core: Configuration, enums, errors, container helpers
    domain: Protocols for the external collaborators
    infrastructure: Starlette router/body-parser adapters and logging
    presentation: Route registry, spec builders and authorization filter

Usage:
    from route_registry import RouteRegistry, SpecConfig, StarletteRouter

    registry = RouteRegistry(StarletteRouter(), config=SpecConfig(title="Pets"))
    registry.get("/pets", list_pets).on_success({"items": "pet"})
    app = registry.routes()
"""

from route_registry.core.config import SpecConfig
from route_registry.core.errors import HTTPError
from route_registry.infrastructure.http.starlette_router import StarletteRouter
from route_registry.presentation.routers.spec.registry import RouteRegistry

__all__ = [
    "HTTPError",
    "RouteRegistry",
    "SpecConfig",
    "StarletteRouter",
]
