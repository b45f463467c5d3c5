import httpx
import pytest

from welfare.storage.exceptions import (
    DocumentConflictError,
    DocumentNotFoundError,
    DocumentTooLargeError,
    StorageError,
    StorageNetworkError,
)
from welfare.storage.supabase_adapter import SupabaseStorageAdapter


def _make_adapter(handler, access_token: str | None = None) -> SupabaseStorageAdapter:
    return SupabaseStorageAdapter(
        base_url="https://demo.supabase.co/",
        api_key="anon-key",
        timeout_seconds=5,
        access_token=access_token,
        transport=httpx.MockTransport(handler),
    )


class TestUpload:
    def test_posts_object_with_headers(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"Key": "application-documents/user-1/doc.pdf"})

        adapter = _make_adapter(handler, access_token="user-jwt")

        reference = adapter.upload(
            "application-documents", "user-1/doc.pdf", b"%PDF", content_type="application/pdf"
        )

        assert reference == "user-1/doc.pdf"
        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/storage/v1/object/application-documents/user-1/doc.pdf"
        assert request.headers["apikey"] == "anon-key"
        assert request.headers["authorization"] == "Bearer user-jwt"
        assert request.headers["cache-control"] == "max-age=3600"
        assert request.headers["x-upsert"] == "false"
        assert request.headers["content-type"] == "application/pdf"
        assert request.content == b"%PDF"

    def test_uses_anon_key_without_session(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        _make_adapter(handler).upload("bucket", "p.pdf", b"x")

        assert seen[0].headers["authorization"] == "Bearer anon-key"
        assert seen[0].headers["content-type"] == "application/octet-stream"

    def test_conflict_status_maps_to_conflict_error(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(409, json={"error": "Duplicate"}))

        with pytest.raises(DocumentConflictError):
            adapter.upload("bucket", "user-1/doc.pdf", b"x")

    def test_duplicate_body_on_400_maps_to_conflict_error(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(400, json={"error": "Duplicate"}))

        with pytest.raises(DocumentConflictError):
            adapter.upload("bucket", "user-1/doc.pdf", b"x")

    def test_payload_too_large(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(413, text="too big"))

        with pytest.raises(DocumentTooLargeError):
            adapter.upload("bucket", "user-1/doc.pdf", b"x")

    def test_other_failure_raises_storage_error(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(StorageError, match="status 500: boom"):
            adapter.upload("bucket", "user-1/doc.pdf", b"x")

    def test_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(StorageNetworkError, match="refused"):
            _make_adapter(handler).upload("bucket", "user-1/doc.pdf", b"x")


class TestDownload:
    def test_returns_content(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.path == "/storage/v1/object/bucket/user-1/doc.pdf"
            return httpx.Response(200, content=b"%PDF-1.4")

        assert _make_adapter(handler).download("bucket", "user-1/doc.pdf") == b"%PDF-1.4"

    def test_missing_object(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(400, json={"error": "not_found"}))

        with pytest.raises(DocumentNotFoundError):
            adapter.download("bucket", "user-1/gone.pdf")


class TestClose:
    def test_closed_adapter_refuses_calls(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        adapter = _make_adapter(handler, access_token="user-jwt")
        adapter.close()

        with pytest.raises(StorageError, match="closed"):
            adapter.upload("bucket", "user-1/doc.pdf", b"x")
        with pytest.raises(StorageError, match="closed"):
            adapter.download("bucket", "user-1/doc.pdf")
