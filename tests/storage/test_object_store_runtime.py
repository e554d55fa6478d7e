"""Runtime wiring tests for object store provider selection."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from config.schema import BucketFSSettings
from storage.providers.memory import InMemoryObjectStore
from storage.providers.sqlite import SQLiteObjectStore
from storage.runtime import build_object_store


class _FakeGCSClient:
    def bucket(self, name: str):
        return MagicMock(name=f"bucket:{name}")

    def list_blobs(self, bucket: str, prefix: str | None = None):
        return iter(())


def _build_fake_gcs_client() -> _FakeGCSClient:
    return _FakeGCSClient()


def _build_invalid_gcs_client() -> object:
    return object()


_not_callable = "not a factory"


def _settings(tmp_path: Path, **storage) -> BucketFSSettings:
    storage.setdefault("sqlite", {"db_path": str(tmp_path / "objects.db")})
    return BucketFSSettings(storage=storage)


def test_defaults_to_memory():
    assert isinstance(build_object_store(env={}), InMemoryObjectStore)


def test_settings_select_sqlite(tmp_path):
    store = build_object_store(_settings(tmp_path, strategy="sqlite"), env={})
    assert isinstance(store, SQLiteObjectStore)
    assert store.db_path == tmp_path / "objects.db"


def test_env_overrides_settings(tmp_path):
    store = build_object_store(
        _settings(tmp_path, strategy="memory"),
        env={"BUCKETFS_STORAGE_STRATEGY": " SQLite "},
    )
    assert isinstance(store, SQLiteObjectStore)


def test_blank_env_falls_back_to_settings(tmp_path):
    store = build_object_store(_settings(tmp_path, strategy="sqlite"), env={"BUCKETFS_STORAGE_STRATEGY": "  "})
    assert isinstance(store, SQLiteObjectStore)


def test_invalid_strategy_fails_loud():
    with pytest.raises(RuntimeError, match="BUCKETFS_STORAGE_STRATEGY"):
        build_object_store(env={"BUCKETFS_STORAGE_STRATEGY": "s3"})


def test_gcs_requires_bucket(tmp_path):
    with pytest.raises(RuntimeError, match="bucket"):
        build_object_store(_settings(tmp_path, strategy="gcs"), client=MagicMock(), env={})


class TestGCSWiring:
    @pytest.fixture(autouse=True)
    def _needs_google(self):
        pytest.importorskip("google.api_core.exceptions")

    def test_injected_client(self, tmp_path):
        from storage.providers.gcs import GCSObjectStore

        client = MagicMock()
        store = build_object_store(
            _settings(tmp_path, strategy="gcs", gcs={"bucket": "data"}),
            client=client,
            env={},
        )
        assert isinstance(store, GCSObjectStore)
        assert store.client is client
        client.bucket.assert_called_once_with("data")

    def test_bucket_from_env(self, tmp_path):
        store = build_object_store(
            _settings(tmp_path, strategy="gcs"),
            client=MagicMock(),
            env={"BUCKETFS_GCS_BUCKET": "from-env"},
        )
        assert store.bucket_name == "from-env"

    def test_client_factory_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv(
            "BUCKETFS_GCS_CLIENT_FACTORY",
            "tests.storage.test_object_store_runtime:_build_fake_gcs_client",
        )
        monkeypatch.setenv("BUCKETFS_STORAGE_STRATEGY", "gcs")
        monkeypatch.setenv("BUCKETFS_GCS_BUCKET", "b")
        store = build_object_store(_settings(tmp_path))
        # the factory module is imported under its dotted name, separately from this test module
        assert type(store.client).__name__ == "_FakeGCSClient"

    @pytest.mark.parametrize(
        ("factory_ref", "message"),
        [
            ("no_colon", "Expected '<module>:<callable>'"),
            ("tests.storage.no_such_module:f", "Failed to import"),
            ("tests.storage.test_object_store_runtime:missing", "missing attribute"),
            ("tests.storage.test_object_store_runtime:_not_callable", "must be callable"),
            ("tests.storage.test_object_store_runtime:_build_invalid_gcs_client", "bucket"),
        ],
    )
    def test_bad_client_factory_fails_loud(self, tmp_path, factory_ref, message):
        with pytest.raises(RuntimeError, match=message):
            build_object_store(
                _settings(tmp_path, strategy="gcs", gcs={"bucket": "b"}),
                client_factory=factory_ref,
                env={},
            )
