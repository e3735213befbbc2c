class DomainError(Exception):
    """Base exception for the school admin domain."""


class ValidationError(DomainError):
    """Raised by caller-side validation when input data is invalid."""


class NotFoundError(DomainError):
    """Raised when a read references an entity that does not exist."""


class StorageError(DomainError):
    """Raised by a storage backend when the durable medium is unavailable."""


class DraftingError(DomainError):
    """Raised when the text generation service cannot produce a draft."""
