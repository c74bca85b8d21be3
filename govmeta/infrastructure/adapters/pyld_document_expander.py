"""JSON-LD expander backed by PyLD.

Runs the JSON-LD 1.1 expansion algorithm over a parsed payload, so
compacted documents such as the published CIP-100 example (with an inline
"@context") become expanded node objects the graph accessor can read.

Remote contexts are not fetched by default: CIP-100 documents carry their
context inline, and a loader that refuses every remote document keeps
expansion free of network access. Pass document_loader to allow it.

Usage:
    expander = PyLdDocumentExpander()
    objects = expander.expand(json.loads(body), "https://example.com/doc.jsonld")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pyld import jsonld
from structlog import get_logger

from govmeta.domain.errors.retrieval import DocumentExpansionError

logger = get_logger()

DocumentLoader = Callable[..., dict[str, Any]]


def refuse_remote_documents(
    url: str, options: dict[str, Any] | None = None
) -> dict[str, Any]:
    """PyLD document loader that never loads anything.

    Raises:
        jsonld.JsonLdError: Always, naming the refused URL.
    """
    raise jsonld.JsonLdError(
        f"Remote document {url} is not loaded",
        "jsonld.LoadDocumentError",
        {"url": url},
        code="loading remote context failed",
    )


class PyLdDocumentExpander:
    """Expands compacted or expanded JSON-LD payloads with PyLD.

    Attributes:
        _document_loader: PyLD document loader used for remote contexts.
    """

    def __init__(self, document_loader: DocumentLoader | None = None) -> None:
        """Initialize the expander.

        Args:
            document_loader: PyLD document loader. Defaults to one that
                refuses every remote document.
        """
        self._document_loader = document_loader or refuse_remote_documents

    def expand(self, payload: Any, base_iri: str) -> list[Any]:
        """Expand a parsed payload.

        Args:
            payload: Parsed JSON payload.
            base_iri: IRI the payload came from; relative identifiers
                resolve against it.

        Returns:
            Expanded top-level objects in document order.

        Raises:
            DocumentExpansionError: If the payload is not a JSON object or
                array, or the JSON-LD processor rejects it.
        """
        if not isinstance(payload, (dict, list)):
            raise DocumentExpansionError(
                f"expected a JSON object or array, got {type(payload).__name__}"
            )

        try:
            objects = jsonld.expand(
                payload,
                {"base": base_iri, "documentLoader": self._document_loader},
            )
        except jsonld.JsonLdError as e:
            logger.warning("document_expansion_failed", base_iri=base_iri, error=str(e))
            raise DocumentExpansionError(str(e)) from e

        logger.debug("document_expanded", base_iri=base_iri, object_count=len(objects))
        return list(objects)
