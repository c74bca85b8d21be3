"""Shared test helpers for govmeta tests.

Usage:
    from tests.helpers import document_node, author_node
    from tests.helpers import cip100_example
"""

from tests.helpers.compacted_example import cip100_context, cip100_example
from tests.helpers.graph_builders import (
    CIP100_README,
    TEST_VECTOR_PUBLIC_KEY,
    TEST_VECTOR_SIGNATURE,
    author_node,
    body_node,
    document_node,
    reference_node,
    update_node,
    value,
    witness_node,
)

__all__ = [
    "cip100_context",
    "cip100_example",
    "CIP100_README",
    "TEST_VECTOR_PUBLIC_KEY",
    "TEST_VECTOR_SIGNATURE",
    "author_node",
    "body_node",
    "document_node",
    "reference_node",
    "update_node",
    "value",
    "witness_node",
]
