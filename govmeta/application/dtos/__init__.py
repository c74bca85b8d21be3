"""Application DTOs for govmeta."""

from govmeta.application.dtos.governance_metadata import (
    AuthorDTO,
    BodyDTO,
    GovernanceDocumentDTO,
    ReferenceDTO,
    UpdateDTO,
    WitnessDTO,
)

__all__: list[str] = [
    "AuthorDTO",
    "BodyDTO",
    "GovernanceDocumentDTO",
    "ReferenceDTO",
    "UpdateDTO",
    "WitnessDTO",
]
