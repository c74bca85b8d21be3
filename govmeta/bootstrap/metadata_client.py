"""Bootstrap wiring for governance metadata retrieval."""

from __future__ import annotations

from govmeta.application.ports.document_expander import DocumentExpanderProtocol
from govmeta.application.ports.graph_accessor import GraphAccessorProtocol
from govmeta.config.metadata_client_config import MetadataClientConfig
from govmeta.infrastructure.adapters.expanded_graph_accessor import (
    ExpandedGraphAccessor,
)
from govmeta.infrastructure.adapters.metadata_client import MetadataClient
from govmeta.infrastructure.adapters.pyld_document_expander import (
    PyLdDocumentExpander,
)

_graph_accessor: GraphAccessorProtocol | None = None
_document_expander: DocumentExpanderProtocol | None = None
_metadata_client: MetadataClient | None = None


def get_graph_accessor() -> GraphAccessorProtocol:
    """Get graph accessor instance."""
    global _graph_accessor
    if _graph_accessor is None:
        _graph_accessor = ExpandedGraphAccessor()
    return _graph_accessor


def get_document_expander() -> DocumentExpanderProtocol:
    """Get document expander instance."""
    global _document_expander
    if _document_expander is None:
        _document_expander = PyLdDocumentExpander()
    return _document_expander


def get_metadata_client() -> MetadataClient:
    """Get metadata client instance configured from the environment."""
    global _metadata_client
    if _metadata_client is None:
        _metadata_client = MetadataClient(
            config=MetadataClientConfig.from_environment(),
            expander=get_document_expander(),
            accessor=get_graph_accessor(),
        )
    return _metadata_client


def set_graph_accessor(accessor: GraphAccessorProtocol) -> None:
    """Set custom graph accessor (for testing)."""
    global _graph_accessor
    _graph_accessor = accessor


def set_document_expander(expander: DocumentExpanderProtocol) -> None:
    """Set custom document expander (for testing or a full JSON-LD processor)."""
    global _document_expander
    _document_expander = expander


def set_metadata_client(client: MetadataClient) -> None:
    """Set custom metadata client (for testing)."""
    global _metadata_client
    _metadata_client = client


def reset_metadata_dependencies() -> None:
    """Reset all singletons (for testing)."""
    global _graph_accessor, _document_expander, _metadata_client
    _graph_accessor = None
    _document_expander = None
    _metadata_client = None
