"""Unit tests for the governance metadata document model."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from govmeta.domain.models.governance_metadata import (
    Author,
    Body,
    Document,
    Reference,
    ReferenceType,
    Update,
    Witness,
)
from govmeta.domain.value_objects.iri import Iri


def _witness() -> Witness:
    return Witness(algorithm="ed25519", public_key="pk", signature="sig")


def _body() -> Body:
    return Body(
        references=(
            Reference(
                reference_type=ReferenceType.OTHER,
                label="CIP-100",
                uri=Iri("https://example.com/cip-100"),
            ),
        ),
        comment="comment",
        external_updates=(Update(title="Blog", uri=Iri("https://314pool.com")),),
    )


class TestReferenceType:
    """Tests for the ReferenceType enumeration."""

    def test_closed_set_of_two_variants(self) -> None:
        """Exactly two reference types exist."""
        assert [t.value for t in ReferenceType] == ["GovernanceMetadata", "Other"]


class TestWitness:
    """Tests for Witness."""

    def test_rejects_non_string_fields(self) -> None:
        """All witness fields must be strings."""
        with pytest.raises(TypeError, match="signature"):
            Witness(algorithm="ed25519", public_key="pk", signature=b"sig")  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        """Witness cannot be mutated."""
        witness = _witness()
        with pytest.raises(FrozenInstanceError):
            witness.signature = "other"  # type: ignore[misc]


class TestAuthor:
    """Tests for Author."""

    def test_requires_witness_instance(self) -> None:
        """Witness must be a Witness."""
        with pytest.raises(TypeError, match="witness"):
            Author(name="Pi", witness={"algorithm": "ed25519"})  # type: ignore[arg-type]


class TestReference:
    """Tests for Reference."""

    def test_requires_iri(self) -> None:
        """Plain strings are not accepted as uri."""
        with pytest.raises(TypeError, match="uri"):
            Reference(
                reference_type=ReferenceType.OTHER,
                label="x",
                uri="https://example.com",  # type: ignore[arg-type]
            )

    def test_requires_reference_type(self) -> None:
        """reference_type must be a ReferenceType member."""
        with pytest.raises(TypeError, match="reference_type"):
            Reference(
                reference_type="Other",  # type: ignore[arg-type]
                label="x",
                uri=Iri("https://example.com"),
            )


class TestBody:
    """Tests for Body."""

    def test_lists_must_be_tuples(self) -> None:
        """Mutable lists are rejected to keep the tree immutable."""
        with pytest.raises(TypeError, match="references"):
            Body(references=[], comment="c", external_updates=())  # type: ignore[arg-type]

    def test_empty_collections_allowed(self) -> None:
        """References and updates may be empty."""
        body = Body(references=(), comment="c", external_updates=())

        assert body.references == ()
        assert body.external_updates == ()


class TestDocument:
    """Tests for Document."""

    def test_structural_equality(self) -> None:
        """Documents built from equal parts are equal and hash alike."""
        first = Document("blake2b-256", (Author("Pi", _witness()),), _body())
        second = Document("blake2b-256", (Author("Pi", _witness()),), _body())

        assert first == second
        assert hash(first) == hash(second)

    def test_to_dict(self) -> None:
        """to_dict produces JSON-compatible data in source order."""
        document = Document("blake2b-256", (Author("Pi", _witness()),), _body())

        assert document.to_dict() == {
            "hash_algorithm": "blake2b-256",
            "authors": [
                {
                    "name": "Pi",
                    "witness": {
                        "algorithm": "ed25519",
                        "public_key": "pk",
                        "signature": "sig",
                    },
                }
            ],
            "body": {
                "references": [
                    {
                        "reference_type": "Other",
                        "label": "CIP-100",
                        "uri": "https://example.com/cip-100",
                    }
                ],
                "comment": "comment",
                "external_updates": [{"title": "Blog", "uri": "https://314pool.com"}],
            },
        }

    def test_authors_must_be_tuple(self) -> None:
        """authors must be a tuple."""
        with pytest.raises(TypeError, match="authors"):
            Document("blake2b-256", [], _body())  # type: ignore[arg-type]
