"""Declaration-time errors.

Raised while routes and schema definitions are being declared. They are
fatal: the application must not start with an inconsistent document.

Error Types:
- DuplicateRouteError: same method + path declared twice
- MalformedPathError: path has no leading resource segment
- DuplicateDefinitionError: named definition registered twice
- UnresolvedReferenceError: a $ref points at an unknown definition
- DocumentFrozenError: declaration attempted after routes() was called
"""

from route_registry.core.enums import ErrorCode
from route_registry.core.errors.base_error import RouteRegistryError


class DeclarationError(RouteRegistryError):
    """Base class for errors raised while declaring routes."""


class DuplicateRouteError(DeclarationError):
    """Method + path pair already registered."""

    def __init__(self, method: str, path: str) -> None:
        super().__init__(
            code=ErrorCode.ROUTE_ALREADY_REGISTERED,
            message=f"Method {method.upper()} already registered for path {path}",
            details={"method": method, "path": path},
        )


class MalformedPathError(DeclarationError):
    """Path does not start with a resource segment (``/segment[/...]``)."""

    def __init__(self, path: str) -> None:
        super().__init__(
            code=ErrorCode.ROUTE_PATH_MALFORMED,
            message=f"Path {path!r} must start with a resource segment",
            details={"path": path},
        )


class DuplicateDefinitionError(DeclarationError):
    """Definition name already present in the document."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.DEFINITION_ALREADY_REGISTERED,
            message=f"Definition {name!r} already registered",
            details={"name": name},
        )


class UnresolvedReferenceError(DeclarationError):
    """One or more $ref pointers do not resolve to a definition."""

    def __init__(self, missing: dict[str, str]) -> None:
        listing = ", ".join(f"{where} -> {name}" for where, name in missing.items())
        super().__init__(
            code=ErrorCode.DEFINITION_UNRESOLVED,
            message=f"Unresolved definition references: {listing}",
            details=missing,
        )


class DocumentFrozenError(DeclarationError):
    """Document is read-only once the registry started serving."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.DOCUMENT_FROZEN,
            message=f"Cannot {operation}: document is frozen",
            details={"operation": operation},
        )
