"""
Domain layer - Pure governance metadata types.

This layer contains:
- The CIP-100 field schema registry
- Immutable document model (Document, Author, Witness, ...)
- Value objects (Iri)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or bootstrap.
Only stdlib and typing imports are allowed.
"""

from govmeta.domain.errors import ExtractionError
from govmeta.domain.exceptions import GovernanceMetadataError
from govmeta.domain.models import CIP100_FIELDS, Document

__all__: list[str] = [
    "CIP100_FIELDS",
    "Document",
    "ExtractionError",
    "GovernanceMetadataError",
]
