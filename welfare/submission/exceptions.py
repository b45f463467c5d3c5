class SubmissionError(Exception):
    """Base exception for all submission pipeline errors."""


class InvalidRequestError(SubmissionError):
    """Raised when a request lacks what is needed to persist it. Not retryable as is."""


class DocumentUploadFailedError(SubmissionError):
    """Raised when a document upload fails. No record was created."""

    def __init__(self, label: str, cause: Exception) -> None:
        super().__init__(f"Failed to upload document '{label}': {cause}")
        self.label = label
        self.cause = cause


class RecordCreationFailedError(SubmissionError):
    """Raised when the record insert fails after all uploads succeeded."""

    def __init__(self, noun: str, cause: Exception) -> None:
        super().__init__(f"Failed to submit {noun}: {cause}")
        self.cause = cause


class SubmissionCancelledError(SubmissionError):
    """Raised when a submission is cancelled before its record was created."""
