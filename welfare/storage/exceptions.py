class StorageError(Exception):
    """Base exception for all document storage errors."""


class DocumentConflictError(StorageError):
    """Raised when the destination path already holds a document."""


class DocumentTooLargeError(StorageError):
    """Raised when a payload exceeds the storage size limit."""


class DocumentNotFoundError(StorageError):
    """Raised when a reference does not resolve to a stored document."""


class StorageNetworkError(StorageError):
    """Raised when the storage service cannot be reached."""
