"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

import os

from govmeta.infrastructure.observability import configure_structlog as _configure_structlog

ENVIRONMENT_ENV = "GOVMETA_ENVIRONMENT"
DEFAULT_ENVIRONMENT = "production"


def configure_logging(environment: str | None = None) -> str:
    """Configure structlog for the given or configured environment.

    Args:
        environment: Explicit environment; falls back to GOVMETA_ENVIRONMENT.

    Returns:
        The environment that was applied.
    """
    resolved = environment or os.getenv(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)
    _configure_structlog(environment=resolved)
    return resolved


__all__ = ["configure_logging"]
