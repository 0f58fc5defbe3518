"""Domain protocols (ports) package.

Protocols for the collaborators the registry talks to. Infrastructure
adapters implement these protocols without inheritance.

Usage:
    from route_registry.domain.protocols import RouterProtocol, LoggerProtocol
"""

from route_registry.domain.protocols.authorization_protocol import (
    AuthorizationRequest,
    AuthorizeHook,
    AuthorizeCheck,
)
from route_registry.domain.protocols.body_parser_protocol import BodyParserProtocol
from route_registry.domain.protocols.collection_protocol import CollectionProtocol
from route_registry.domain.protocols.error_channel_protocol import (
    ErrorChannelProtocol,
)
from route_registry.domain.protocols.logger_protocol import LoggerProtocol
from route_registry.domain.protocols.router_protocol import (
    Handler,
    Middleware,
    RequestContextProtocol,
    RouterProtocol,
)

__all__ = [
    "AuthorizationRequest",
    "AuthorizeHook",
    "AuthorizeCheck",
    "BodyParserProtocol",
    "CollectionProtocol",
    "ErrorChannelProtocol",
    "Handler",
    "LoggerProtocol",
    "Middleware",
    "RequestContextProtocol",
    "RouterProtocol",
]
