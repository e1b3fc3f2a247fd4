"""Custom log processors for structured logging.

Usage:
    from commandline.logging.formatters import truncate_large_values

Dependencies:
    - structlog processors
"""

from typing import Any


def truncate_large_values(max_length: int = 500):
    """Create a processor that truncates overly large string values.

    Command lines handed to the parser are logged as-is, so a very long
    input would otherwise be written in full.

    Args:
        max_length: Maximum string length before truncation.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
