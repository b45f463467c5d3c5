from abc import ABC, abstractmethod


class BaseDocumentStore(ABC):
    """Contract for all document storage adapters."""

    @abstractmethod
    def upload(
        self,
        bucket: str,
        path: str,
        payload: bytes,
        content_type: str | None = None,
    ) -> str:
        """Store a payload at a bucket-relative path.

        Path uniqueness is the caller's responsibility: an existing object is
        never replaced.

        Args:
            bucket: Destination bucket name.
            path: Bucket-relative destination path.
            payload: Raw document bytes.
            content_type: Optional MIME type recorded with the object.

        Returns:
            Reference token under which the payload is retrievable.

        Raises:
            DocumentConflictError: if the path is already taken.
            StorageError: on any other failure.
        """

    @abstractmethod
    def download(self, bucket: str, reference: str) -> bytes:
        """Return the payload stored under a reference.

        Raises:
            DocumentNotFoundError: if nothing is stored under the reference.
            StorageError: on any other failure.
        """

    def close(self) -> None:
        """Release connections and credentials. The store accepts no calls afterwards."""
