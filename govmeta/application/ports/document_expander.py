"""Document expander protocol.

Boundary to the JSON-LD expansion step that turns a parsed payload into
expanded graph objects. The expansion algorithm itself is provided by an
adapter.
"""

from __future__ import annotations

from typing import Any, Protocol


class DocumentExpanderProtocol(Protocol):
    """Protocol for expanding a parsed JSON payload into graph objects."""

    def expand(self, payload: Any, base_iri: str) -> list[Any]:
        """Expand a parsed payload.

        Args:
            payload: Parsed JSON (as returned by json.loads).
            base_iri: IRI the payload was retrieved from, used to resolve
                relative identifiers.

        Returns:
            Expanded top-level objects in document order.

        Raises:
            DocumentExpansionError: If the payload cannot be expanded.
        """
        ...
