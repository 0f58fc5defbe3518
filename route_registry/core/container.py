"""Composition root for shared infrastructure.

Usage:
    from route_registry.core.container import get_logger

    logger = get_logger()
    logger.info("Document frozen", paths=12)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from route_registry.core.config import get_settings

if TYPE_CHECKING:
    from route_registry.domain.protocols import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - testing/ci: ConsoleAdapter (JSON)
    - everything else: ConsoleAdapter (human-readable)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from route_registry.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.uses_json_logs, level=settings.log_level)
