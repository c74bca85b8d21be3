"""Graph accessor protocol.

This module defines the read-only capability the extraction service uses
to inspect an expanded graph node. The extraction service is written
against this protocol only; the node and value representations belong to
the implementation.

Developer Golden Rules:
1. ORDER - get_all preserves source binding order exactly
2. FIRST - get_first is always the first element get_all would return
3. NO RAISING - coercions return None instead of raising
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class GraphAccessorProtocol(Protocol):
    """Protocol for reading predicate-keyed values from graph nodes.

    Implementations must guarantee:
    1. get_all returns values in the order they were bound in the source
    2. Coercions never raise; a failed coercion returns None
    3. Nodes are never mutated
    """

    def get_first(self, node: Any, predicate_id: str) -> Any | None:
        """Get the first value bound to a predicate.

        Args:
            node: Graph node to read.
            predicate_id: Canonical identifier of the predicate.

        Returns:
            The first bound value, or None if the predicate is absent.
        """
        ...

    def get_all(self, node: Any, predicate_id: str) -> Sequence[Any]:
        """Get every value bound to a predicate, in source order.

        Args:
            node: Graph node to read.
            predicate_id: Canonical identifier of the predicate.

        Returns:
            Bound values in source order; empty if the predicate is absent.
        """
        ...

    def as_string(self, value: Any) -> str | None:
        """Coerce a value to a scalar string.

        Returns:
            The string, or None if value is not a scalar string.
        """
        ...

    def as_subnode(self, value: Any) -> Any | None:
        """Coerce a value to a nested graph node.

        Returns:
            The node, or None if value is not a node.
        """
        ...

    def type_tags(self, node: Any) -> Sequence[Any]:
        """Get every declared type entry of a node, in source order.

        Entries are returned unfiltered; non-string entries are left for
        the caller to reject.

        Returns:
            Declared type entries; empty if none are declared.
        """
        ...
