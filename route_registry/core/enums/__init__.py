"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from route_registry.core.enums import ErrorCode, Environment, HTTPMethod
"""

from route_registry.core.enums.environment import Environment
from route_registry.core.enums.error_code import ErrorCode
from route_registry.core.enums.http_method import HTTPMethod, ParamLocation

__all__ = ["ErrorCode", "Environment", "HTTPMethod", "ParamLocation"]
