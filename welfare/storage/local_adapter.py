from pathlib import Path

from welfare.storage.base import BaseDocumentStore
from welfare.storage.exceptions import (
    DocumentConflictError,
    DocumentNotFoundError,
    DocumentTooLargeError,
    StorageError,
)


class LocalDocumentStore(BaseDocumentStore):
    """Stores documents on disk under {root}/{bucket}/{path}."""

    STORAGE_ROOT = Path("/app/files")

    def __init__(
        self,
        root: Path | None = None,
        max_document_bytes: int | None = None,
    ) -> None:
        self._root = root if root is not None else self.STORAGE_ROOT
        self._max_document_bytes = max_document_bytes

    def upload(
        self,
        bucket: str,
        path: str,
        payload: bytes,
        content_type: str | None = None,
    ) -> str:
        _ = content_type  # the filesystem keeps no object metadata
        if self._max_document_bytes is not None and len(payload) > self._max_document_bytes:
            raise DocumentTooLargeError(
                f"Document of {len(payload)} bytes exceeds the "
                f"{self._max_document_bytes} byte storage limit"
            )
        target = self._resolve_path(bucket, path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("xb") as handle:
                handle.write(payload)
        except FileExistsError as exc:
            raise DocumentConflictError(f"Document already exists: {bucket}/{path}") from exc
        except OSError as exc:
            raise StorageError(f"Failed to write {bucket}/{path}: {exc}") from exc
        return path

    def download(self, bucket: str, reference: str) -> bytes:
        target = self._resolve_path(bucket, reference)
        if not target.is_file():
            raise DocumentNotFoundError(f"Document not found: {bucket}/{reference}")
        try:
            return target.read_bytes()
        except OSError as exc:
            raise StorageError(f"Failed to read {bucket}/{reference}: {exc}") from exc

    def _resolve_path(self, bucket: str, path: str) -> Path:
        bucket_root = (self._root / bucket).resolve()
        target = (bucket_root / path).resolve()
        if not target.is_relative_to(bucket_root):
            raise StorageError(f"Path escapes bucket '{bucket}': {path}")
        return target
