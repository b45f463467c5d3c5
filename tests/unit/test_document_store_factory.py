from pathlib import Path

import pytest

from welfare.config.settings import Settings
from welfare.storage.factory import DocumentStoreFactory
from welfare.storage.local_adapter import LocalDocumentStore
from welfare.storage.supabase_adapter import SupabaseStorageAdapter


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestDocumentStoreFactory:
    def test_creates_local_store(self, tmp_path: Path) -> None:
        store = DocumentStoreFactory.create(_settings(storage_root=str(tmp_path)))

        assert isinstance(store, LocalDocumentStore)

    def test_creates_supabase_adapter(self) -> None:
        store = DocumentStoreFactory.create(
            _settings(storage_backend="Supabase", supabase_url="https://demo.supabase.co"),
            access_token="user-jwt",
        )

        assert isinstance(store, SupabaseStorageAdapter)
        store.close()

    def test_supabase_requires_url(self) -> None:
        with pytest.raises(ValueError, match="supabase_url is required"):
            DocumentStoreFactory.create(_settings(storage_backend="supabase"))

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown storage backend 's3'"):
            DocumentStoreFactory.create(_settings(storage_backend="s3"))
