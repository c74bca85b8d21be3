"""Correlation ID management for tracing document loads.

Correlation IDs live in a ContextVar so each asyncio task loading a
document keeps its own ID across await points.

Usage:
    token = set_correlation_id(request_id)
    try:
        document = await client.load(url)  # every log entry carries the ID
    finally:
        reset_correlation_id(token)

    MetadataClient.load generates an ID for the duration of the load when
    none is set.

    # In structlog configuration
    processors = [..., correlation_id_processor, ...]
"""

from contextvars import ContextVar, Token
from typing import Any
from uuid import uuid4

# Empty string means "not set"
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4).

    Returns:
        A new UUID4 string.
    """
    return str(uuid4())


def get_correlation_id() -> str:
    """Get the current correlation ID from context.

    Returns:
        The current correlation ID or empty string if not set.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> Token[str]:
    """Set the correlation ID in the current context.

    Args:
        correlation_id: The correlation ID to set.

    Returns:
        Token that restores the previous ID via reset_correlation_id.
    """
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token[str]) -> None:
    """Restore the correlation ID that was current before a set.

    Args:
        token: Token returned by set_correlation_id.
    """
    _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation_id to every log entry.

    Args:
        logger: The logger instance (unused, required by structlog).
        method_name: The logging method name (unused, required by structlog).
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary with correlation_id added when one is set.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict
