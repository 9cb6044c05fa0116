class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced user or record does not exist."""


class DuplicateEntryError(DomainError):
    """Raised when storage rejects a row that already exists."""


class StorageError(DomainError):
    """Raised when the underlying database fails."""


class BadgeIdExhaustedError(StorageError):
    """Raised when no free badge ID was found within the retry limit."""
