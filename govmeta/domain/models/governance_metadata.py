"""Governance metadata document model (CIP-100).

Frozen dataclasses for a signed governance statement. Every entity is
built exactly once by the extraction service and is never mutated.
Ordered collections are tuples, so a Document is deeply immutable and
two extractions of the same node compare equal.

Ownership:
    Document -> authors (Author -> Witness), body
    Body -> references, external_updates
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from govmeta.domain.value_objects.iri import Iri


def _require_str(value: object, field_name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be str, got {type(value).__name__}")


@dataclass(frozen=True, eq=True)
class Witness:
    """A witness from an author who has signed the document.

    Public key and signature are opaque; verifying them is a downstream
    concern.

    Attributes:
        algorithm: Algorithm used to sign the document (e.g. "ed25519").
        public_key: Public key used to sign the document.
        signature: Signature of the document.
    """

    algorithm: str
    public_key: str
    signature: str

    def __post_init__(self) -> None:
        _require_str(self.algorithm, "algorithm")
        _require_str(self.public_key, "public_key")
        _require_str(self.signature, "signature")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "algorithm": self.algorithm,
            "public_key": self.public_key,
            "signature": self.signature,
        }


@dataclass(frozen=True, eq=True)
class Author:
    """An author who has signed the metadata document.

    Attributes:
        name: Self-reported display name. Not authenticated unless tied
            to the witness key by other means.
        witness: Attestation of this author's approval of the document.
    """

    name: str
    witness: Witness

    def __post_init__(self) -> None:
        _require_str(self.name, "name")
        if not isinstance(self.witness, Witness):
            raise TypeError(
                f"witness must be Witness, got {type(self.witness).__name__}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"name": self.name, "witness": self.witness.to_dict()}


class ReferenceType(str, Enum):
    """Type of document being referenced.

    Values:
        GOVERNANCE_METADATA: Another CIP-100 governance metadata document.
        OTHER: Any other document; not assumed to be CIP-100 compatible.
    """

    GOVERNANCE_METADATA = "GovernanceMetadata"
    OTHER = "Other"


@dataclass(frozen=True, eq=True)
class Reference:
    """A reference to another document giving context to this one.

    Attributes:
        reference_type: Classification of the referenced document.
        label: Label to display for the reference.
        uri: Where to find the referenced document.
    """

    reference_type: ReferenceType
    label: str
    uri: Iri

    def __post_init__(self) -> None:
        if not isinstance(self.reference_type, ReferenceType):
            raise TypeError(
                "reference_type must be ReferenceType, "
                f"got {type(self.reference_type).__name__}"
            )
        _require_str(self.label, "label")
        if not isinstance(self.uri, Iri):
            raise TypeError(f"uri must be Iri, got {type(self.uri).__name__}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "reference_type": self.reference_type.value,
            "label": self.label,
            "uri": str(self.uri),
        }


@dataclass(frozen=True, eq=True)
class Update:
    """A place to find updated information about this document.

    Updates are unauthenticated material.

    Attributes:
        title: Title of the update source (e.g. "Blog").
        uri: Where to find the update source.
    """

    title: str
    uri: Iri

    def __post_init__(self) -> None:
        _require_str(self.title, "title")
        if not isinstance(self.uri, Iri):
            raise TypeError(f"uri must be Iri, got {type(self.uri).__name__}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"title": self.title, "uri": str(self.uri)}


@dataclass(frozen=True, eq=True)
class Body:
    """Body of the governance metadata document.

    Attributes:
        references: References in source order (may be empty).
        comment: Free-form comment associated with the document.
        external_updates: Update sources in source order (may be empty).
    """

    references: tuple[Reference, ...]
    comment: str
    external_updates: tuple[Update, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.references, tuple):
            raise TypeError(
                f"references must be tuple, got {type(self.references).__name__}"
            )
        _require_str(self.comment, "comment")
        if not isinstance(self.external_updates, tuple):
            raise TypeError(
                "external_updates must be tuple, "
                f"got {type(self.external_updates).__name__}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "references": [r.to_dict() for r in self.references],
            "comment": self.comment,
            "external_updates": [u.to_dict() for u in self.external_updates],
        }


@dataclass(frozen=True, eq=True)
class Document:
    """The governance metadata document itself.

    Attributes:
        hash_algorithm: Algorithm used to hash the document for signing.
        authors: Cosigning authors in source order (may be empty).
        body: Document body.

    Example:
        >>> doc.hash_algorithm
        'blake2b-256'
        >>> [a.name for a in doc.authors]
        ['Pi Lanningham']
    """

    hash_algorithm: str
    authors: tuple[Author, ...]
    body: Body

    def __post_init__(self) -> None:
        _require_str(self.hash_algorithm, "hash_algorithm")
        if not isinstance(self.authors, tuple):
            raise TypeError(f"authors must be tuple, got {type(self.authors).__name__}")
        if not isinstance(self.body, Body):
            raise TypeError(f"body must be Body, got {type(self.body).__name__}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "hash_algorithm": self.hash_algorithm,
            "authors": [a.to_dict() for a in self.authors],
            "body": self.body.to_dict(),
        }
