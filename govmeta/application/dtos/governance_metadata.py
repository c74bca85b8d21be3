"""Governance metadata DTOs for application layer.

These Pydantic models mirror the frozen domain model for JSON output.
Identifiers are serialized as plain strings and the reference type as
its display value ("GovernanceMetadata" or "Other").
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from govmeta.domain.models.governance_metadata import (
    Author,
    Body,
    Document,
    Reference,
    Update,
    Witness,
)


class WitnessDTO(BaseModel):
    """Author witness (opaque signature material)."""

    model_config = ConfigDict(frozen=True)

    algorithm: Annotated[
        str,
        Field(description="Signature algorithm (e.g. ed25519)"),
    ]
    public_key: Annotated[
        str,
        Field(description="Public key used to sign the document"),
    ]
    signature: Annotated[
        str,
        Field(description="Signature over the document hash"),
    ]

    @classmethod
    def from_domain(cls, witness: Witness) -> WitnessDTO:
        return cls(
            algorithm=witness.algorithm,
            public_key=witness.public_key,
            signature=witness.signature,
        )


class AuthorDTO(BaseModel):
    """Cosigning author."""

    model_config = ConfigDict(frozen=True)

    name: Annotated[
        str,
        Field(description="Self-reported display name"),
    ]
    witness: Annotated[
        WitnessDTO,
        Field(description="Witness attesting to the author's approval"),
    ]

    @classmethod
    def from_domain(cls, author: Author) -> AuthorDTO:
        return cls(name=author.name, witness=WitnessDTO.from_domain(author.witness))


class ReferenceDTO(BaseModel):
    """Reference to another document."""

    model_config = ConfigDict(frozen=True)

    reference_type: Annotated[
        Literal["GovernanceMetadata", "Other"],
        Field(description="Classification of the referenced document"),
    ]
    label: Annotated[
        str,
        Field(description="Label to display for the reference"),
    ]
    uri: Annotated[
        str,
        Field(description="IRI of the referenced document"),
    ]

    @classmethod
    def from_domain(cls, reference: Reference) -> ReferenceDTO:
        return cls(
            reference_type=reference.reference_type.value,
            label=reference.label,
            uri=str(reference.uri),
        )


class UpdateDTO(BaseModel):
    """External update source."""

    model_config = ConfigDict(frozen=True)

    title: Annotated[
        str,
        Field(description="Title of the update source"),
    ]
    uri: Annotated[
        str,
        Field(description="IRI of the update source"),
    ]

    @classmethod
    def from_domain(cls, update: Update) -> UpdateDTO:
        return cls(title=update.title, uri=str(update.uri))


class BodyDTO(BaseModel):
    """Document body."""

    model_config = ConfigDict(frozen=True)

    references: Annotated[
        list[ReferenceDTO],
        Field(description="References in source order"),
    ]
    comment: Annotated[
        str,
        Field(description="Free-form comment"),
    ]
    external_updates: Annotated[
        list[UpdateDTO],
        Field(description="Update sources in source order"),
    ]

    @classmethod
    def from_domain(cls, body: Body) -> BodyDTO:
        return cls(
            references=[ReferenceDTO.from_domain(r) for r in body.references],
            comment=body.comment,
            external_updates=[UpdateDTO.from_domain(u) for u in body.external_updates],
        )


class GovernanceDocumentDTO(BaseModel):
    """Complete governance metadata document."""

    model_config = ConfigDict(frozen=True)

    hash_algorithm: Annotated[
        str,
        Field(description="Hash algorithm used when signing (e.g. blake2b-256)"),
    ]
    authors: Annotated[
        list[AuthorDTO],
        Field(description="Cosigning authors in source order"),
    ]
    body: Annotated[
        BodyDTO,
        Field(description="Document body"),
    ]

    @classmethod
    def from_domain(cls, document: Document) -> GovernanceDocumentDTO:
        """Build the DTO tree from an extracted Document.

        Args:
            document: Extracted governance metadata document.

        Returns:
            DTO suitable for model_dump_json().
        """
        return cls(
            hash_algorithm=document.hash_algorithm,
            authors=[AuthorDTO.from_domain(a) for a in document.authors],
            body=BodyDTO.from_domain(document.body),
        )
