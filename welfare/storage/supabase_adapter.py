import httpx

from welfare.storage.base import BaseDocumentStore
from welfare.storage.exceptions import (
    DocumentConflictError,
    DocumentNotFoundError,
    DocumentTooLargeError,
    StorageError,
    StorageNetworkError,
)


class SupabaseStorageAdapter(BaseDocumentStore):
    """Document storage adapter built on the Supabase Storage REST API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout_seconds: int,
        access_token: str | None = None,
        cache_control: str = "3600",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._cache_control = cache_control
        self._client = httpx.Client(
            base_url=f"{base_url.rstrip('/')}/storage/v1",
            timeout=timeout_seconds,
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {access_token or api_key}",
            },
            transport=transport,
        )

    def upload(
        self,
        bucket: str,
        path: str,
        payload: bytes,
        content_type: str | None = None,
    ) -> str:
        headers = {
            "cache-control": f"max-age={self._cache_control}",
            "x-upsert": "false",
            "content-type": content_type or "application/octet-stream",
        }
        self._ensure_open()
        try:
            response = self._client.post(f"/object/{bucket}/{path}", content=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise StorageNetworkError(f"Storage network error: {exc}") from exc

        if response.is_success:
            return path
        error = self._error_name(response)
        if response.status_code == 409 or error == "Duplicate":
            raise DocumentConflictError(f"Document already exists: {bucket}/{path}")
        if response.status_code == 413 or error == "Payload too large":
            raise DocumentTooLargeError(f"Document rejected as too large: {bucket}/{path}")
        raise StorageError(
            f"Upload of {bucket}/{path} failed with status {response.status_code}: "
            f"{response.text}"
        )

    def download(self, bucket: str, reference: str) -> bytes:
        self._ensure_open()
        try:
            response = self._client.get(f"/object/{bucket}/{reference}")
        except httpx.HTTPError as exc:
            raise StorageNetworkError(f"Storage network error: {exc}") from exc

        if response.status_code == 404 or self._error_name(response) == "not_found":
            raise DocumentNotFoundError(f"Document not found: {bucket}/{reference}")
        if not response.is_success:
            raise StorageError(
                f"Download of {bucket}/{reference} failed with status "
                f"{response.status_code}: {response.text}"
            )
        return response.content

    def close(self) -> None:
        self._client.close()

    def _ensure_open(self) -> None:
        # A closed client would raise RuntimeError, outside the storage taxonomy.
        if self._client.is_closed:
            raise StorageError("Document store is closed")

    @staticmethod
    def _error_name(response: httpx.Response) -> str:
        # Storage reports some failures as 400 with the real code in the body.
        if response.is_success:
            return ""
        try:
            body = response.json()
        except ValueError:
            return ""
        if not isinstance(body, dict):
            return ""
        return str(body.get("error") or "")
