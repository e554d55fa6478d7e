"""ObjectFileSystem — hierarchical filesystem over a flat object store.

Every call is a blocking pass-through to the store: no caching, no locking,
no retries. Concurrent writers to the same path race at the backend.
"""

from __future__ import annotations

import logging

from bucketfs.interfaces import DirEntry, FileSystem
from bucketfs.listing import synthesize_entries
from bucketfs.paths import resolve
from bucketfs.streams import ObjectFile, open_append, open_read, open_write
from config.schema import BucketFSSettings
from storage.contracts import ObjectStore, ObjectWriter

logger = logging.getLogger(__name__)


class ObjectFileSystem(FileSystem):
    """Files and directories derived from object keys under ``prefix``."""

    def __init__(self, store: ObjectStore, prefix: str = "") -> None:
        self._store = store
        self._prefix = prefix

    @classmethod
    def from_settings(cls, settings: BucketFSSettings | None = None, **store_kwargs) -> ObjectFileSystem:
        """Build the configured object store and wrap it."""
        from storage.runtime import build_object_store

        settings = settings or BucketFSSettings()
        return cls(build_object_store(settings, **store_kwargs), settings.root_prefix)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def store(self) -> ObjectStore:
        return self._store

    def key(self, name: str) -> str:
        """Backend key for a root-relative path."""
        return resolve(self._prefix, name)

    def create(self, name: str) -> ObjectWriter:
        key = self.key(name)
        logger.debug("create %r -> %r", name, key)
        return open_write(self._store, key)

    def append(self, name: str) -> ObjectWriter:
        key = self.key(name)
        logger.debug("append %r -> %r", name, key)
        return open_append(self._store, key, name)

    def open(self, name: str) -> ObjectFile:
        key = self.key(name)
        logger.debug("open %r -> %r", name, key)
        return open_read(self._store, key, name)

    def read_dir(self, dir: str) -> list[DirEntry]:
        prefix = self.key(dir)
        keys = list(self._store.list_keys(prefix))
        logger.debug("read_dir %r -> prefix %r (%d keys)", dir, prefix, len(keys))
        return synthesize_entries(prefix, keys, path=dir)

    def close(self) -> None:
        self._store.close()

    def __enter__(self) -> ObjectFileSystem:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
