"""CIP-100 field schema registry.

Maps every semantic field of a governance metadata document to the
canonical identifier used as a predicate in expanded JSON-LD, plus the two
type-tag identifiers that classify references.

The registry is a process-wide constant: CIP100_FIELDS is built once at
import time and is frozen, so concurrent extractions can share it without
synchronization.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

CIP100_NAMESPACE: str = (
    "https://github.com/cardano-foundation/CIPs/blob/master/CIP-0100/README.md#"
)
FOAF_NAMESPACE: str = "http://xmlns.com/foaf/0.1/"


@dataclass(frozen=True)
class Cip100Fields:
    """Canonical identifiers for CIP-100 document fields.

    Attributes:
        hash_algorithm: Document hash algorithm.
        authors: Repeated author nodes.
        body: Document body node.
        body_references: Repeated reference nodes within the body.
        body_comment: Free-form body comment.
        body_external_updates: Repeated update nodes within the body.
        update_title: Title of an update source.
        update_uri: Target IRI of an update source.
        reference_type: Reference type predicate.
        reference_type_governance_metadata: Type tag of a reference to
            another CIP-100 document.
        reference_type_other: Type tag of a reference to any other document.
        reference_label: Display label of a reference.
        reference_uri: Target IRI of a reference.
        author_name: Display name of an author (FOAF).
        author_witness: Witness node of an author.
        witness_algorithm: Signature algorithm of a witness.
        witness_public_key: Public key of a witness.
        witness_signature: Signature of a witness.
    """

    hash_algorithm: str
    authors: str
    body: str
    body_references: str
    body_comment: str
    body_external_updates: str
    update_title: str
    update_uri: str
    reference_type: str
    reference_type_governance_metadata: str
    reference_type_other: str
    reference_label: str
    reference_uri: str
    author_name: str
    author_witness: str
    witness_algorithm: str
    witness_public_key: str
    witness_signature: str

    def as_mapping(self) -> dict[str, str]:
        """Return the registry as a semantic-name to identifier mapping."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


CIP100_FIELDS: Cip100Fields = Cip100Fields(
    hash_algorithm=f"{CIP100_NAMESPACE}hashAlgorithm",
    authors=f"{CIP100_NAMESPACE}authors",
    body=f"{CIP100_NAMESPACE}body",
    body_references=f"{CIP100_NAMESPACE}references",
    body_comment=f"{CIP100_NAMESPACE}comment",
    body_external_updates=f"{CIP100_NAMESPACE}externalUpdates",
    update_title=f"{CIP100_NAMESPACE}update-title",
    update_uri=f"{CIP100_NAMESPACE}update-uri",
    reference_type=f"{CIP100_NAMESPACE}referenceType",
    reference_type_governance_metadata=f"{CIP100_NAMESPACE}GovernanceMetadataReference",
    reference_type_other=f"{CIP100_NAMESPACE}OtherReference",
    reference_label=f"{CIP100_NAMESPACE}reference-label",
    reference_uri=f"{CIP100_NAMESPACE}reference-uri",
    author_name=f"{FOAF_NAMESPACE}name",
    author_witness=f"{CIP100_NAMESPACE}witness",
    witness_algorithm=f"{CIP100_NAMESPACE}witnessAlgorithm",
    witness_public_key=f"{CIP100_NAMESPACE}publicKey",
    witness_signature=f"{CIP100_NAMESPACE}signature",
)
