"""Infrastructure adapters implementing application ports."""

from govmeta.infrastructure.adapters.expanded_document_expander import (
    ExpandedDocumentExpander,
)
from govmeta.infrastructure.adapters.expanded_graph_accessor import (
    ExpandedGraphAccessor,
)
from govmeta.infrastructure.adapters.metadata_client import MetadataClient
from govmeta.infrastructure.adapters.pyld_document_expander import (
    PyLdDocumentExpander,
)

__all__: list[str] = [
    "ExpandedDocumentExpander",
    "ExpandedGraphAccessor",
    "MetadataClient",
    "PyLdDocumentExpander",
]
