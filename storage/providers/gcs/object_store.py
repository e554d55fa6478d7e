"""
Google Cloud Storage object store.

Thin pass-through over google-cloud-storage. Credentials, retries and transport
timeouts are the client's business; nothing here adds to them.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Iterator
from typing import Any

from google.api_core.exceptions import NotFound

logger = logging.getLogger(__name__)

# Writes larger than this spill from memory to a temporary file.
SPOOL_MAX_BYTES = 8 * 1024 * 1024


class GCSObjectWriter:
    """Spools written bytes locally and uploads them in one request on close().

    No upload is started before close(), so abort() or a dropped writer
    leaves the previous object in place.
    """

    def __init__(self, key: str, blob: Any) -> None:
        self.key = key
        self._blob = blob
        self._buffer = tempfile.SpooledTemporaryFile(max_size=SPOOL_MAX_BYTES)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: bytes) -> int:
        if self._closed:
            raise ValueError(f"write to closed object writer: {self.key!r}")
        return self._buffer.write(data)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._blob.upload_from_file(self._buffer, rewind=True)
        finally:
            self._buffer.close()

    def abort(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._buffer.close()

    def __enter__(self) -> GCSObjectWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.abort()
        else:
            self.close()


class GCSObjectStore:
    """Objects of one bucket, addressed by blob name."""

    missing_errors: tuple[type[BaseException], ...] = (NotFound,)

    def __init__(
        self,
        bucket: str,
        *,
        client: Any | None = None,
        project: str | None = None,
    ) -> None:
        if not bucket:
            raise ValueError("GCS object store requires a bucket name.")
        if client is None:
            from google.cloud import storage

            client = storage.Client(project=project)
        self.bucket_name = bucket
        self.client = client
        self._bucket = client.bucket(bucket)

    def open_writer(self, key: str) -> GCSObjectWriter:
        return GCSObjectWriter(key, self._bucket.blob(key))

    def open_reader(self, key: str) -> Any:
        blob = self._bucket.blob(key)
        # @@@gcs-eager-missing - BlobReader only fails on first read; reload surfaces NotFound at open time.
        blob.reload()
        return blob.open("rb")

    def list_keys(self, prefix: str) -> Iterator[str]:
        logger.debug("gcs list bucket=%s prefix=%r", self.bucket_name, prefix)
        for blob in self.client.list_blobs(self.bucket_name, prefix=prefix or None):
            yield blob.name

    def close(self) -> None:
        close = getattr(self.client, "close", None)
        if callable(close):
            close()
