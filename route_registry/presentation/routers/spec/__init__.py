"""Route registry and Swagger document package.

The registry is the single source of truth for routes: one declaration
wires the handler into the router, documents it, and attaches its
authorization and error-mapping policy.

Modules:
    schema: to_schema() - object descriptor to JSON-Schema transform
    parameters: to_param() - parameter descriptor normalization
    responses: to_response() - response descriptors and named definitions
    references: $ref helpers and reachability
    method_spec: MethodSpec builder and ErrorRule
    document: DocumentStore - paths, definitions, serialization
    auth_filter: filter_for_requester() - per-requester document view
    registry: RouteRegistry - router binding and request pipeline
    resource: register_resource() - standard CRUD routes for a collection

Usage:
    from route_registry.presentation.routers.spec import RouteRegistry
"""

from route_registry.presentation.routers.spec.auth_filter import filter_for_requester
from route_registry.presentation.routers.spec.document import DocumentStore
from route_registry.presentation.routers.spec.method_spec import ErrorRule, MethodSpec
from route_registry.presentation.routers.spec.parameters import to_param
from route_registry.presentation.routers.spec.registry import RouteRegistry
from route_registry.presentation.routers.spec.resource import register_resource
from route_registry.presentation.routers.spec.responses import to_response
from route_registry.presentation.routers.spec.schema import to_schema

__all__ = [
    "DocumentStore",
    "ErrorRule",
    "MethodSpec",
    "RouteRegistry",
    "filter_for_requester",
    "register_resource",
    "to_param",
    "to_response",
    "to_schema",
]
