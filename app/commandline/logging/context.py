"""Parse context binding for structured logging.

Every log entry written while a command line is being parsed carries the
same parse_id, so the entries of one parse can be grouped together.

Usage:
    from commandline.logging import bind_parse_context

    with bind_parse_context(source="startup"):
        parser = CommandParser(text)

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_parse_context(
    parse_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind parse-scoped context to all logs within the context manager.

    Args:
        parse_id: Identifier for this parse. Generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The parse_id bound for the duration of the block.
    """
    context: dict[str, Any] = {"parse_id": parse_id or uuid.uuid4().hex}
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["parse_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_parse_id() -> Optional[str]:
    """Get the parse_id bound in the current logging context, if any."""
    return structlog.contextvars.get_contextvars().get("parse_id")
