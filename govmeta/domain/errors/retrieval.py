"""Document retrieval domain errors.

Raised by the metadata client before extraction starts: fetching the
document, parsing its JSON payload and expanding it into graph nodes.
A malformed payload is a recoverable error here, not a process abort.
"""

from __future__ import annotations

from govmeta.domain.exceptions import GovernanceMetadataError


class DocumentRetrievalError(GovernanceMetadataError):
    """Base exception for document retrieval errors."""

    pass


class DocumentFetchError(DocumentRetrievalError):
    """Raised when the document cannot be fetched over HTTP.

    Covers transport failures (DNS, timeouts, refused connections) and
    non-success status codes.
    """

    def __init__(
        self,
        url: str,
        reason: str,
        status_code: int | None = None,
    ) -> None:
        """Initialize DocumentFetchError.

        Args:
            url: The URL that was requested.
            reason: Description of the failure.
            status_code: HTTP status code, if a response was received.
        """
        self.url = url
        self.reason = reason
        self.status_code = status_code

        message = f"Failed to fetch {url}: {reason}"
        if status_code is not None:
            message = f"{message} (status: {status_code})"
        super().__init__(message)


class MalformedPayloadError(DocumentRetrievalError):
    """Raised when a fetched payload is not usable JSON."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize MalformedPayloadError.

        Args:
            url: The URL the payload came from.
            reason: Parser or size-limit message.
        """
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed payload from {url}: {reason}")


class DocumentExpansionError(DocumentRetrievalError):
    """Raised when a payload cannot be expanded into graph nodes."""

    def __init__(self, reason: str) -> None:
        """Initialize DocumentExpansionError.

        Args:
            reason: Why the expander rejected the payload.
        """
        self.reason = reason
        super().__init__(f"Document expansion failed: {reason}")


class EmptyDocumentError(DocumentRetrievalError):
    """Raised when expansion yields no objects."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"No objects in document: {url}")


class NotANodeError(DocumentRetrievalError):
    """Raised when the first expanded object is a value, not a node."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"First object in document is not a node: {url}")
