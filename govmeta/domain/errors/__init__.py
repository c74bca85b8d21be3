"""Domain errors for govmeta.

Extraction errors describe invariant violations found while walking a
graph node. Retrieval errors describe failures before extraction starts.
"""

from govmeta.domain.errors.extraction import (
    ExtractionError,
    ExtractionErrorKind,
    InvalidCardinalityError,
    InvalidIdentifierError,
    MissingFieldError,
    UnknownEnumerationValueError,
    WrongTypeError,
)
from govmeta.domain.errors.retrieval import (
    DocumentExpansionError,
    DocumentFetchError,
    DocumentRetrievalError,
    EmptyDocumentError,
    MalformedPayloadError,
    NotANodeError,
)

__all__: list[str] = [
    "DocumentExpansionError",
    "DocumentFetchError",
    "DocumentRetrievalError",
    "EmptyDocumentError",
    "ExtractionError",
    "ExtractionErrorKind",
    "InvalidCardinalityError",
    "InvalidIdentifierError",
    "MalformedPayloadError",
    "MissingFieldError",
    "NotANodeError",
    "UnknownEnumerationValueError",
    "WrongTypeError",
]
