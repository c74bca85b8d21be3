"""
Pytest configuration and shared fixtures for govmeta tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/<layer>/
- Integration tests go in tests/integration/
- Expanded-form documents are built with tests.helpers
"""

from collections.abc import Iterator
from typing import Any

import pytest
import structlog

from govmeta.application.services.extraction_service import (
    GovernanceMetadataExtractor,
)
from govmeta.infrastructure.adapters.expanded_graph_accessor import (
    ExpandedGraphAccessor,
)
from tests.helpers import document_node


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from govmeta import __version__

    return __version__


@pytest.fixture
def accessor() -> ExpandedGraphAccessor:
    """Graph accessor over expanded JSON-LD nodes."""
    return ExpandedGraphAccessor()


@pytest.fixture
def extractor(accessor: ExpandedGraphAccessor) -> GovernanceMetadataExtractor:
    """Extractor wired to the expanded-form accessor."""
    return GovernanceMetadataExtractor(accessor)


@pytest.fixture
def test_vector() -> dict[str, Any]:
    """The CIP-100 test vector in expanded form."""
    return document_node()


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults so logging tests do not leak configuration."""
    yield
    structlog.reset_defaults()
