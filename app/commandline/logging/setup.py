"""Structlog configuration and module loggers.

Importing commandline never touches logging configuration. Module loggers
are lazy proxies over the standard library logger of the module, so their
output goes wherever the host application routes ``commandline.*`` logs.
Applications that want the structlog pipeline used here call
``configure_logging()`` once at startup.

Usage:
    from commandline.logging import configure_logging

    configure_logging(log_level="DEBUG")
"""

import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from commandline.logging.formatters import truncate_large_values


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    max_value_length: Optional[int] = None,
) -> BoundLogger:
    """Configure structlog and the root logger for an application.

    Args:
        log_level: Log level name (DEBUG, INFO, WARNING, etc). Defaults to
            settings.LOG_LEVEL.
        is_production: JSON output when True, console output otherwise.
            Defaults to settings.is_production.
        max_value_length: Longest string value written before truncation.
            Defaults to settings.LOG_MAX_VALUE_LENGTH.

    Returns:
        A logger bound to the new configuration.
    """
    from commandline.configuration import settings

    if is_production is None:
        is_production = settings.is_production
    if max_value_length is None:
        max_value_length = settings.LOG_MAX_VALUE_LENGTH

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.format_exc_info,
        truncate_large_values(max_length=max_value_length),
    ]
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger(name: str) -> BoundLogger:
    """Get a lazy logger for a module, bound to its component name.

    Args:
        name: The module's ``__name__``.

    Example:
        logger = get_module_logger(__name__)
        # {"component": "parser", "module_path": "commandline.parsing.parser"}
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        component=name.rsplit(".", 1)[-1],
        module_path=name,
    )
