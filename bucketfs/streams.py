"""Read/write stream adapters over object store readers and writers."""

from __future__ import annotations

import logging
import shutil

from bucketfs.errors import NotFound, Unsupported, map_missing
from bucketfs.interfaces import DirEntry, File
from storage.contracts import ObjectReader, ObjectStore, ObjectWriter

logger = logging.getLogger(__name__)

COPY_CHUNK_SIZE = 64 * 1024


class ObjectFile(File):
    """Read handle backed by a single backend read stream."""

    def __init__(self, key: str, reader: ObjectReader) -> None:
        self.key = key
        self._reader = reader
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self, size: int = -1) -> bytes:
        if self._closed:
            raise ValueError(f"read from closed file: {self.key!r}")
        return self._reader.read(size)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._reader.close()

    def read_dir(self, n: int = -1) -> list[DirEntry]:
        raise Unsupported("read_dir on an open file handle is not implemented")


def open_read(store: ObjectStore, key: str, path: str | None = None) -> ObjectFile:
    with map_missing(store, path if path is not None else key):
        reader = store.open_reader(key)
    return ObjectFile(key, reader)


def open_write(store: ObjectStore, key: str) -> ObjectWriter:
    return store.open_writer(key)


def open_append(store: ObjectStore, key: str, path: str | None = None) -> ObjectWriter:
    """Emulate append as read-existing, copy into a fresh writer, keep writing.

    Not atomic: anything written to ``key`` between the read here and the
    returned writer's close() is overwritten.
    """
    try:
        existing: ObjectFile | None = open_read(store, key, path)
    except NotFound:
        logger.debug("append to missing key %r starts empty", key)
        existing = None

    try:
        writer = store.open_writer(key)
        if existing is not None:
            try:
                shutil.copyfileobj(existing, writer, COPY_CHUNK_SIZE)
            except Exception:
                writer.abort()
                raise
    finally:
        if existing is not None:
            existing.close()
    return writer
