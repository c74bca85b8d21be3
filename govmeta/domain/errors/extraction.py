"""Extraction domain errors.

Domain exceptions raised while converting an expanded graph node into the
typed governance metadata model. Extraction is fail-fast: the first
violation anywhere in the tree is raised and nothing is aggregated.

Every error carries:
- kind: the taxonomy entry (see ExtractionErrorKind)
- path: segments from the document root to the failing location,
  e.g. ("body", "references[1]", "uri")
"""

from __future__ import annotations

from enum import Enum

from govmeta.domain.exceptions import GovernanceMetadataError

ROOT_PATH_LABEL: str = "<document>"


class ExtractionErrorKind(str, Enum):
    """Closed taxonomy of extraction failures.

    Values:
        MISSING_FIELD: Required predicate absent on a node.
        WRONG_TYPE: Value present but not coercible to the expected type.
        INVALID_CARDINALITY: Expected exactly one value, found another count.
        UNKNOWN_ENUMERATION_VALUE: Type tag maps to no known variant.
        INVALID_IDENTIFIER: String intended as an IRI fails syntax checks.
    """

    MISSING_FIELD = "missing_field"
    WRONG_TYPE = "wrong_type"
    INVALID_CARDINALITY = "invalid_cardinality"
    UNKNOWN_ENUMERATION_VALUE = "unknown_enumeration_value"
    INVALID_IDENTIFIER = "invalid_identifier"


def format_path(path: tuple[str, ...]) -> str:
    """Render a path tuple as a dotted location string.

    Args:
        path: Segments from the document root.

    Returns:
        Dotted path, or a root marker for the empty path.
    """
    if not path:
        return ROOT_PATH_LABEL
    return ".".join(path)


class ExtractionError(GovernanceMetadataError):
    """Base exception for extraction failures.

    All extraction exceptions inherit from this class.

    Attributes:
        kind: Which invariant failed.
        path: Location of the failure relative to the document root.
    """

    kind: ExtractionErrorKind

    def __init__(self, message: str, path: tuple[str, ...] = ()) -> None:
        """Initialize ExtractionError.

        Args:
            message: Description of the violated invariant.
            path: Location of the failure relative to the document root.
        """
        self.path = tuple(path)
        super().__init__(f"{message} (at {format_path(self.path)})")

    @property
    def location(self) -> str:
        """Dotted rendering of the failure path."""
        return format_path(self.path)


class MissingFieldError(ExtractionError):
    """Raised when a required predicate has no value on a node."""

    kind = ExtractionErrorKind.MISSING_FIELD

    def __init__(self, field: str, path: tuple[str, ...] = ()) -> None:
        """Initialize MissingFieldError.

        Args:
            field: Semantic name of the missing field.
            path: Location of the field relative to the document root.
        """
        self.field = field
        super().__init__(f"Missing required field: {field}", path)


class WrongTypeError(ExtractionError):
    """Raised when a value is present but cannot be coerced."""

    kind = ExtractionErrorKind.WRONG_TYPE

    def __init__(
        self,
        field: str,
        expected: str,
        path: tuple[str, ...] = (),
    ) -> None:
        """Initialize WrongTypeError.

        Args:
            field: Semantic name of the field.
            expected: Name of the expected type ("string", "node").
            path: Location of the field relative to the document root.
        """
        self.field = field
        self.expected = expected
        super().__init__(f"Field {field} is not a {expected}", path)


class InvalidCardinalityError(ExtractionError):
    """Raised when a field expected to hold exactly one value does not."""

    kind = ExtractionErrorKind.INVALID_CARDINALITY

    def __init__(
        self,
        context: str,
        count: int,
        path: tuple[str, ...] = (),
    ) -> None:
        """Initialize InvalidCardinalityError.

        Args:
            context: What was being counted (e.g. "reference type").
            count: How many values were found.
            path: Location relative to the document root.
        """
        self.context = context
        self.count = count
        super().__init__(
            f"Expected exactly one {context}, found {count}",
            path,
        )


class UnknownEnumerationValueError(ExtractionError):
    """Raised when a type tag matches no recognized enumeration variant."""

    kind = ExtractionErrorKind.UNKNOWN_ENUMERATION_VALUE

    def __init__(self, tag: str, path: tuple[str, ...] = ()) -> None:
        """Initialize UnknownEnumerationValueError.

        Args:
            tag: The unrecognized type identifier.
            path: Location relative to the document root.
        """
        self.tag = tag
        super().__init__(f"Unknown enumeration value: {tag}", path)


class InvalidIdentifierError(ExtractionError):
    """Raised when a string intended as an IRI fails syntactic validation."""

    kind = ExtractionErrorKind.INVALID_IDENTIFIER

    def __init__(
        self,
        raw: str,
        reason: str | None = None,
        path: tuple[str, ...] = (),
    ) -> None:
        """Initialize InvalidIdentifierError.

        Args:
            raw: The rejected identifier text.
            reason: Optional explanation from the validator.
            path: Location relative to the document root.
        """
        self.raw = raw
        self.reason = reason
        message = f"Invalid identifier: {raw!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, path)
