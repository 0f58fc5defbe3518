"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from route_registry.core.errors import DeclarationError, HTTPError
"""

from route_registry.core.errors.base_error import RouteRegistryError
from route_registry.core.errors.declaration_errors import (
    DeclarationError,
    DocumentFrozenError,
    DuplicateDefinitionError,
    DuplicateRouteError,
    MalformedPathError,
    UnresolvedReferenceError,
)
from route_registry.core.errors.http_error import HTTPError, error_status

__all__ = [
    "RouteRegistryError",
    "DeclarationError",
    "DuplicateRouteError",
    "MalformedPathError",
    "DuplicateDefinitionError",
    "UnresolvedReferenceError",
    "DocumentFrozenError",
    "HTTPError",
    "error_status",
]
