"""Configuration module for govmeta.

Available Configurations:
- MetadataClientConfig: HTTP retrieval of governance metadata documents
"""

from govmeta.config.metadata_client_config import (
    DEFAULT_METADATA_CLIENT_CONFIG,
    TEST_METADATA_CLIENT_CONFIG,
    MetadataClientConfig,
)

__all__ = [
    "MetadataClientConfig",
    "DEFAULT_METADATA_CLIENT_CONFIG",
    "TEST_METADATA_CLIENT_CONFIG",
]
