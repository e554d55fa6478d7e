"""Runtime wiring helpers for object store provider selection."""

from __future__ import annotations

import importlib
import logging
import os
from collections.abc import Mapping
from typing import Any, Callable

from config.schema import BucketFSSettings, StorageStrategy
from storage.contracts import ObjectStore

logger = logging.getLogger(__name__)

_SUPPORTED_STRATEGIES: tuple[StorageStrategy, ...] = ("memory", "sqlite", "gcs")


def build_object_store(
    settings: BucketFSSettings | None = None,
    *,
    client: Any | None = None,
    client_factory: str | None = None,
    env: Mapping[str, str] | None = None,
) -> ObjectStore:
    """Build the configured object store from settings/environment."""
    settings = settings or BucketFSSettings()
    env_map = env if env is not None else os.environ
    strategy = _resolve_strategy(env_map.get("BUCKETFS_STORAGE_STRATEGY"), settings.storage.strategy)
    logger.info("object store strategy=%s", strategy)

    if strategy == "memory":
        from storage.providers.memory import InMemoryObjectStore

        return InMemoryObjectStore()

    if strategy == "sqlite":
        from storage.providers.sqlite import SQLiteObjectStore

        return SQLiteObjectStore(settings.storage.sqlite.db_path)

    gcs = settings.storage.gcs
    bucket = env_map.get("BUCKETFS_GCS_BUCKET") or gcs.bucket
    if not bucket:
        raise RuntimeError(
            "GCS storage strategy requires a bucket. "
            "Set storage.gcs.bucket in config or BUCKETFS_GCS_BUCKET."
        )

    if client is None:
        factory_ref = (
            client_factory
            if client_factory is not None
            else env_map.get("BUCKETFS_GCS_CLIENT_FACTORY")
        )
        if factory_ref:
            client = _load_factory(factory_ref)()
            _ensure_gcs_client(client)

    from storage.providers.gcs import GCSObjectStore

    return GCSObjectStore(bucket, client=client, project=gcs.project)


def _resolve_strategy(raw: str | None, configured: StorageStrategy) -> StorageStrategy:
    value = (raw or "").strip().lower()
    if not value:
        return configured
    if value in _SUPPORTED_STRATEGIES:
        return value  # type: ignore[return-value]
    raise RuntimeError(
        f"Invalid BUCKETFS_STORAGE_STRATEGY value: {raw!r}. "
        f"Supported values: {', '.join(_SUPPORTED_STRATEGIES)}."
    )


def _load_factory(factory_ref: str) -> Callable[[], Any]:
    module_name, sep, attr_name = factory_ref.partition(":")
    if not sep or not module_name or not attr_name:
        raise RuntimeError(
            "Invalid BUCKETFS_GCS_CLIENT_FACTORY format. "
            "Expected '<module>:<callable>'."
        )

    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise RuntimeError(
            f"Failed to import GCS client factory module {module_name!r}: {exc}"
        ) from exc

    try:
        factory = getattr(module, attr_name)
    except AttributeError as exc:
        raise RuntimeError(
            f"GCS client factory {factory_ref!r} is missing attribute {attr_name!r}."
        ) from exc

    if not callable(factory):
        raise RuntimeError(f"GCS client factory {factory_ref!r} must be callable.")
    return factory


def _ensure_gcs_client(client: Any) -> None:
    if client is None:
        raise RuntimeError("GCS client factory returned None.")
    for method in ("bucket", "list_blobs"):
        if not callable(getattr(client, method, None)):
            raise RuntimeError(
                f"GCS client must expose a callable {method}() API. "
                "Check BUCKETFS_GCS_CLIENT_FACTORY output."
            )
