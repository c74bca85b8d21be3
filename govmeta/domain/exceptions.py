"""Base exception classes for the govmeta domain layer."""


class GovernanceMetadataError(Exception):
    """Base exception for all govmeta errors.

    All project-specific exceptions MUST inherit from this class so callers
    can handle extraction and retrieval failures with a single handler.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
