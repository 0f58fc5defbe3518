"""Registry-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.

Categories:
- Declaration errors (raised while routes and definitions are declared)
- Request errors (raised while a request is being handled)
"""

from enum import Enum


class ErrorCode(Enum):
    """Registry-level error codes (machine-readable)."""

    # Declaration errors
    ROUTE_ALREADY_REGISTERED = "route_already_registered"
    ROUTE_PATH_MALFORMED = "route_path_malformed"
    DEFINITION_ALREADY_REGISTERED = "definition_already_registered"
    DEFINITION_UNRESOLVED = "definition_unresolved"
    DOCUMENT_FROZEN = "document_frozen"

    # Request errors
    HTTP_ERROR = "http_error"
    BODY_INVALID = "body_invalid"
