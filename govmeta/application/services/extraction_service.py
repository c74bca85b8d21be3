"""Typed extraction service for CIP-100 governance metadata.

Walks an expanded graph node through a GraphAccessorProtocol and builds
the immutable Document model, one explicit conversion routine per entity.

Extraction rules:
- Required scalar: first bound value, must coerce to a string
- Repeated field: every bound value in source order, each a sub-node
- Required nested object: first bound value, must coerce to a sub-node
- IRI field: required scalar string that must parse as an Iri
- Reference type: exactly one type tag, mapped to ReferenceType

Failure is fail-fast: the first violation is raised as an ExtractionError
carrying its path from the document root. Nothing is aggregated and no
partial document is ever returned.

The service holds no mutable state, performs no I/O, and may be shared
across threads and tasks.

Usage:
    extractor = GovernanceMetadataExtractor(accessor)
    document = extractor.extract_document(root_node)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from structlog import get_logger

from govmeta.application.ports.graph_accessor import GraphAccessorProtocol
from govmeta.domain.errors.extraction import (
    ExtractionError,
    InvalidCardinalityError,
    InvalidIdentifierError,
    MissingFieldError,
    UnknownEnumerationValueError,
    WrongTypeError,
    format_path,
)
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
from govmeta.domain.value_objects.iri import Iri

logger = get_logger()

T = TypeVar("T")

Path = tuple[str, ...]


class GovernanceMetadataExtractor:
    """Converts expanded graph nodes into governance metadata documents.

    Attributes:
        _accessor: Read capability over graph nodes.
        _fields: Canonical identifiers for every field and type tag.
    """

    def __init__(
        self,
        accessor: GraphAccessorProtocol,
        fields: Cip100Fields = CIP100_FIELDS,
    ) -> None:
        """Initialize the extractor.

        Args:
            accessor: Graph accessor used to read node values.
            fields: Field schema registry. Defaults to CIP-100.
        """
        self._accessor = accessor
        self._fields = fields

    def extract_document(self, node: Any) -> Document:
        """Extract a full governance metadata document.

        Args:
            node: Root graph node of the document.

        Returns:
            The fully validated Document.

        Raises:
            ExtractionError: On the first invariant violation in the tree.
        """
        try:
            document = self._extract_document(node, ())
        except ExtractionError as e:
            logger.warning(
                "governance_document_extraction_failed",
                error_kind=e.kind.value,
                field_path=format_path(e.path),
                error=str(e),
            )
            raise

        logger.debug(
            "governance_document_extracted",
            hash_algorithm=document.hash_algorithm,
            author_count=len(document.authors),
            reference_count=len(document.body.references),
            update_count=len(document.body.external_updates),
        )
        return document

    def extract_author(self, node: Any, path: Path = ()) -> Author:
        """Extract an author and its witness.

        Raises:
            ExtractionError: If name or witness is missing or malformed.
        """
        f = self._fields
        name = self._required_string(node, f.author_name, "name", path)
        witness = self.extract_witness(
            self._required_node(node, f.author_witness, "witness", path),
            path + ("witness",),
        )
        return Author(name=name, witness=witness)

    def extract_witness(self, node: Any, path: Path = ()) -> Witness:
        """Extract a witness. Key and signature are carried as opaque text.

        Raises:
            ExtractionError: If any of the three fields is missing or not a string.
        """
        f = self._fields
        return Witness(
            algorithm=self._required_string(
                node, f.witness_algorithm, "algorithm", path
            ),
            public_key=self._required_string(
                node, f.witness_public_key, "public_key", path
            ),
            signature=self._required_string(
                node, f.witness_signature, "signature", path
            ),
        )

    def resolve_reference_type(self, node: Any, path: Path = ()) -> ReferenceType:
        """Classify a reference node by its declared type tag.

        A reference must carry exactly one type tag, and it must be one of
        the two registered reference types. No default is ever assumed.

        Args:
            node: Reference graph node.
            path: Location of the node relative to the document root.

        Returns:
            The matching ReferenceType.

        Raises:
            WrongTypeError: If a type entry is not an identifier string.
            InvalidCardinalityError: If the node has zero or several type tags.
            UnknownEnumerationValueError: If the tag is not a reference type.
        """
        type_path = path + ("@type",)
        declared = self._accessor.type_tags(node)
        for index, entry in enumerate(declared):
            if not isinstance(entry, str):
                raise WrongTypeError(
                    f"@type[{index}]", "string", path + (f"@type[{index}]",)
                )
        tags = set(declared)
        if len(tags) != 1:
            raise InvalidCardinalityError("reference type", len(tags), type_path)
        (tag,) = tags
        if tag == self._fields.reference_type_governance_metadata:
            return ReferenceType.GOVERNANCE_METADATA
        if tag == self._fields.reference_type_other:
            return ReferenceType.OTHER
        raise UnknownEnumerationValueError(tag, type_path)

    def extract_reference(self, node: Any, path: Path = ()) -> Reference:
        """Extract a reference to another document.

        Raises:
            ExtractionError: If the type, label or uri is invalid.
        """
        f = self._fields
        reference_type = self.resolve_reference_type(node, path)
        label = self._required_string(node, f.reference_label, "label", path)
        uri = self._required_iri(node, f.reference_uri, "uri", path)
        return Reference(reference_type=reference_type, label=label, uri=uri)

    def extract_update(self, node: Any, path: Path = ()) -> Update:
        """Extract an external update source.

        Raises:
            ExtractionError: If the title or uri is invalid.
        """
        f = self._fields
        title = self._required_string(node, f.update_title, "title", path)
        uri = self._required_iri(node, f.update_uri, "uri", path)
        return Update(title=title, uri=uri)

    def extract_body(self, node: Any, path: Path = ()) -> Body:
        """Extract the document body.

        Raises:
            ExtractionError: If the comment is invalid or any reference or
                update fails to extract.
        """
        f = self._fields
        references = self._repeated(
            node, f.body_references, "references", path, self.extract_reference
        )
        comment = self._required_string(node, f.body_comment, "comment", path)
        external_updates = self._repeated(
            node,
            f.body_external_updates,
            "external_updates",
            path,
            self.extract_update,
        )
        return Body(
            references=references,
            comment=comment,
            external_updates=external_updates,
        )

    def _extract_document(self, node: Any, path: Path) -> Document:
        f = self._fields
        hash_algorithm = self._required_string(
            node, f.hash_algorithm, "hash_algorithm", path
        )
        authors = self._repeated(node, f.authors, "authors", path, self.extract_author)
        body = self.extract_body(
            self._required_node(node, f.body, "body", path),
            path + ("body",),
        )
        return Document(hash_algorithm=hash_algorithm, authors=authors, body=body)

    def _required_string(
        self, node: Any, predicate_id: str, name: str, path: Path
    ) -> str:
        field_path = path + (name,)
        value = self._accessor.get_first(node, predicate_id)
        if value is None:
            raise MissingFieldError(name, field_path)
        text = self._accessor.as_string(value)
        if text is None:
            raise WrongTypeError(name, "string", field_path)
        return text

    def _required_node(self, node: Any, predicate_id: str, name: str, path: Path) -> Any:
        field_path = path + (name,)
        value = self._accessor.get_first(node, predicate_id)
        if value is None:
            raise MissingFieldError(name, field_path)
        subnode = self._accessor.as_subnode(value)
        if subnode is None:
            raise WrongTypeError(name, "node", field_path)
        return subnode

    def _required_iri(self, node: Any, predicate_id: str, name: str, path: Path) -> Iri:
        raw = self._required_string(node, predicate_id, name, path)
        try:
            return Iri(raw)
        except ValueError as e:
            raise InvalidIdentifierError(raw, str(e), path + (name,)) from e

    def _repeated(
        self,
        node: Any,
        predicate_id: str,
        name: str,
        path: Path,
        convert: Callable[[Any, Path], T],
    ) -> tuple[T, ...]:
        items: list[T] = []
        for index, value in enumerate(self._accessor.get_all(node, predicate_id)):
            item_path = path + (f"{name}[{index}]",)
            subnode = self._accessor.as_subnode(value)
            if subnode is None:
                raise WrongTypeError(f"{name}[{index}]", "node", item_path)
            items.append(convert(subnode, item_path))
        return tuple(items)


def extract_document(node: Any, accessor: GraphAccessorProtocol) -> Document:
    """Extract a governance metadata document with the CIP-100 registry.

    Args:
        node: Root graph node of the document.
        accessor: Graph accessor used to read node values.

    Returns:
        The fully validated Document.

    Raises:
        ExtractionError: On the first invariant violation in the tree.
    """
    return GovernanceMetadataExtractor(accessor).extract_document(node)


def resolve_reference_type(
    node: Any, accessor: GraphAccessorProtocol
) -> ReferenceType:
    """Classify a reference node with the CIP-100 registry.

    Raises:
        WrongTypeError: If a type entry is not an identifier string.
        InvalidCardinalityError: If the node has zero or several type tags.
        UnknownEnumerationValueError: If the tag is not a reference type.
    """
    return GovernanceMetadataExtractor(accessor).resolve_reference_type(node)
