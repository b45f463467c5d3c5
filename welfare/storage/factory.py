from pathlib import Path

from welfare.config.settings import Settings
from welfare.storage.base import BaseDocumentStore
from welfare.storage.local_adapter import LocalDocumentStore
from welfare.storage.supabase_adapter import SupabaseStorageAdapter


class DocumentStoreFactory:
    """Creates the configured document storage adapter."""

    BACKENDS = ("local", "supabase")

    @classmethod
    def create(cls, settings: Settings, access_token: str | None = None) -> BaseDocumentStore:
        """Create a document store; access_token scopes Supabase calls to the signed-in user."""
        backend = settings.storage_backend.lower()
        if backend == "local":
            return LocalDocumentStore(
                root=Path(settings.storage_root),
                max_document_bytes=settings.storage_max_document_bytes,
            )
        if backend == "supabase":
            if not settings.supabase_url:
                raise ValueError("supabase_url is required for storage_backend=supabase")
            return SupabaseStorageAdapter(
                base_url=settings.supabase_url,
                api_key=settings.supabase_anon_key,
                timeout_seconds=settings.supabase_timeout_seconds,
                access_token=access_token,
                cache_control=settings.storage_cache_control,
            )
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
