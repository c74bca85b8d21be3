"""Application services for govmeta."""

from govmeta.application.services.extraction_service import (
    GovernanceMetadataExtractor,
    extract_document,
    resolve_reference_type,
)

__all__: list[str] = [
    "GovernanceMetadataExtractor",
    "extract_document",
    "resolve_reference_type",
]
