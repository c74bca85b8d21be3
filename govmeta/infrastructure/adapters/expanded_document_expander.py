"""Pass-through expander for payloads already in JSON-LD expanded form.

Accepted shapes:
- a list of expanded objects
- a single expanded node object
- an object holding only "@graph" (and optionally "@id")

Compacted documents carry an "@context" and need a full JSON-LD
processor (PyLdDocumentExpander); they are rejected with
DocumentExpansionError.
"""

from __future__ import annotations

from typing import Any

from structlog import get_logger

from govmeta.domain.errors.retrieval import DocumentExpansionError

logger = get_logger()

CONTEXT_KEY: str = "@context"
GRAPH_KEY: str = "@graph"


class ExpandedDocumentExpander:
    """Returns the top-level objects of an already-expanded payload."""

    def expand(self, payload: Any, base_iri: str) -> list[Any]:
        """Return expanded objects in document order.

        Args:
            payload: Parsed JSON payload.
            base_iri: IRI the payload came from (logged only).

        Returns:
            Top-level expanded objects.

        Raises:
            DocumentExpansionError: If the payload is compacted or not a
                JSON object or array.
        """
        if isinstance(payload, list):
            objects = payload
        elif isinstance(payload, dict):
            if CONTEXT_KEY in payload:
                raise DocumentExpansionError(
                    "payload carries @context; a JSON-LD processor is required"
                )
            graph = payload.get(GRAPH_KEY)
            if graph is not None and set(payload) <= {GRAPH_KEY, "@id"}:
                objects = graph if isinstance(graph, list) else [graph]
            else:
                objects = [payload]
        else:
            raise DocumentExpansionError(
                f"expected a JSON object or array, got {type(payload).__name__}"
            )

        logger.debug("document_expanded", base_iri=base_iri, object_count=len(objects))
        return list(objects)
