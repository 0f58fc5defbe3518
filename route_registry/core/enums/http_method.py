"""HTTP method and parameter location enums."""

from enum import Enum


class HTTPMethod(str, Enum):
    """HTTP methods accepted by the registry.

    Attributes:
        GET: Safe, idempotent read operations
        POST: Non-idempotent create operations
        PUT: Idempotent complete replacement
        PATCH: Non-idempotent partial update
        DELETE: Idempotent delete operations
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def spec_key(self) -> str:
        """Lower-case key used under a Swagger path item."""
        return self.value.lower()


class ParamLocation(str, Enum):
    """Swagger 2.0 parameter locations."""

    PATH = "path"
    QUERY = "query"
    BODY = "body"
    HEADER = "header"
    FORM_DATA = "formData"
