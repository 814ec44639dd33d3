"""Observability module for the Zabbix API client.

Structured logging via structlog, with console output for development,
JSON output for production, and redaction of credentials in logged params.

Example:
    >>> from zabbix_api.observability import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info("zabbix_api.client.call", method="host.get")
"""

from zabbix_api.observability.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    is_debug_mode,
    sanitize_for_logging,
)

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "is_debug_mode",
    "sanitize_for_logging",
]
