"""In-process object store backed by a dict."""

from __future__ import annotations

import io
import threading

from storage.contracts import ObjectMissing
from storage.models import BufferedObjectWriter


class InMemoryObjectStore:
    """Dict-backed object store. Contents live for the lifetime of the instance."""

    missing_errors: tuple[type[BaseException], ...] = (ObjectMissing,)

    def __init__(self, objects: dict[str, bytes] | None = None) -> None:
        self._objects: dict[str, bytes] = dict(objects or {})
        self._lock = threading.Lock()

    def open_writer(self, key: str) -> BufferedObjectWriter:
        return BufferedObjectWriter(key, self._put)

    def open_reader(self, key: str) -> io.BytesIO:
        with self._lock:
            try:
                data = self._objects[key]
            except KeyError:
                raise ObjectMissing(key) from None
        return io.BytesIO(data)

    def list_keys(self, prefix: str) -> list[str]:
        with self._lock:
            return sorted(k for k in self._objects if k.startswith(prefix))

    def close(self) -> None:
        """Compatibility no-op for protocol parity."""
        return None

    def _put(self, key: str, data: bytes) -> None:
        with self._lock:
            self._objects[key] = data
