"""Application ports (abstract interfaces) for govmeta.

Ports define the capabilities the application layer consumes. Adapters in
the infrastructure layer implement them.
"""

from govmeta.application.ports.document_expander import DocumentExpanderProtocol
from govmeta.application.ports.graph_accessor import GraphAccessorProtocol

__all__: list[str] = [
    "DocumentExpanderProtocol",
    "GraphAccessorProtocol",
]
