"""Domain models for govmeta."""

from govmeta.domain.models.field_schema import CIP100_FIELDS, Cip100Fields
from govmeta.domain.models.governance_metadata import (
    Author,
    Body,
    Document,
    Reference,
    ReferenceType,
    Update,
    Witness,
)

__all__: list[str] = [
    "CIP100_FIELDS",
    "Author",
    "Body",
    "Cip100Fields",
    "Document",
    "Reference",
    "ReferenceType",
    "Update",
    "Witness",
]
