"""Metadata client configuration.

This module defines configuration for fetching governance metadata
documents, with environment variable overrides.

Environment Variables:
- GOVMETA_HTTP_TIMEOUT: Request timeout in seconds (default: 10.0)
- GOVMETA_MAX_PAYLOAD_BYTES: Largest accepted payload (default: 1048576)
- GOVMETA_FOLLOW_REDIRECTS: Follow HTTP redirects (default: true)
- GOVMETA_USER_AGENT: User-Agent header (default: govmeta/<version>)
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from govmeta import __version__

DEFAULT_USER_AGENT: str = f"govmeta/{__version__}"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_float_env(key: str, default: float) -> float:
    """Get positive float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set, not a number, not finite or
            not positive.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError:
        return default
    if not math.isfinite(parsed) or parsed <= 0:
        return default
    return parsed


def _get_int_env(key: str, default: int) -> int:
    """Get positive integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set, not an integer or not positive.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _get_bool_env(key: str, default: bool) -> bool:
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class MetadataClientConfig:
    """Configuration for the governance metadata client.

    Attributes:
        timeout_seconds: Total HTTP request timeout.
        max_payload_bytes: Payloads larger than this are rejected as malformed.
        follow_redirects: Whether to follow HTTP redirects.
        user_agent: User-Agent header sent with every request.
    """

    timeout_seconds: float = 10.0
    max_payload_bytes: int = 1_048_576
    follow_redirects: bool = True
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got {self.timeout_seconds}"
            )
        if self.max_payload_bytes < 1:
            raise ValueError(
                f"max_payload_bytes must be positive, got {self.max_payload_bytes}"
            )
        if not self.user_agent:
            raise ValueError("user_agent must be non-empty")

    @classmethod
    def from_environment(cls) -> "MetadataClientConfig":
        """Create config from environment variables with defaults.

        Returns:
            MetadataClientConfig with values from environment or defaults.
        """
        return cls(
            timeout_seconds=_get_float_env("GOVMETA_HTTP_TIMEOUT", 10.0),
            max_payload_bytes=_get_int_env("GOVMETA_MAX_PAYLOAD_BYTES", 1_048_576),
            follow_redirects=_get_bool_env("GOVMETA_FOLLOW_REDIRECTS", True),
            user_agent=os.environ.get("GOVMETA_USER_AGENT") or DEFAULT_USER_AGENT,
        )


# Default configuration for production
DEFAULT_METADATA_CLIENT_CONFIG = MetadataClientConfig()

# Test configuration with a short timeout and small payload cap
TEST_METADATA_CLIENT_CONFIG = MetadataClientConfig(
    timeout_seconds=1.0,
    max_payload_bytes=65_536,
)
