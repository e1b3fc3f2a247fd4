"""Structured logging infrastructure.

This package provides centralized logging configuration for commandline
using structlog.

Public API:
    - configure_logging(): Opt-in structlog setup for applications
    - get_module_logger(): Get a lazy logger for a module
    - bind_parse_context(): Context manager binding a parse_id to logs
    - get_parse_id(): Get the parse_id bound in the current context
    - truncate_large_values(): Processor limiting string lengths

Example:
    from commandline.logging import get_module_logger

    logger = get_module_logger(__name__)
    logger.debug("module_initialized")
"""

from commandline.logging.setup import (
    configure_logging,
    get_module_logger,
)
from commandline.logging.context import (
    bind_parse_context,
    get_parse_id,
)
from commandline.logging.formatters import truncate_large_values

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_parse_context",
    "get_parse_id",
    "truncate_large_values",
]
