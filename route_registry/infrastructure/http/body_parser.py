"""JSON request body parser."""

import json
from typing import Any

from route_registry.core.enums import ErrorCode
from route_registry.core.errors import HTTPError
from route_registry.infrastructure.http.context import RequestContext


class JSONBodyParser:
    """Parses JSON request bodies.

    Empty bodies parse to None. Malformed JSON is a client error (400).
    """

    async def parse(self, ctx: RequestContext) -> Any:
        raw = await ctx.request.body()
        if not raw.strip():
            return None
        try:
            return json.loads(raw)
        except ValueError as error:
            raise HTTPError(
                400,
                "Invalid JSON body",
                code=ErrorCode.BODY_INVALID,
                details={"reason": str(error)},
            ) from error
