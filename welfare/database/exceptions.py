class RecordStoreError(Exception):
    """Raised when the relational store rejects or fails a statement."""


class RecordNotFoundError(RecordStoreError):
    """Raised when an update targets a row that does not exist."""


class PoolNotInitializedError(RecordStoreError, RuntimeError):
    """Raised when a connection is requested before init_pool()."""
