"""Shared storage helpers — provider-neutral buffered writer."""

from __future__ import annotations

import io
from collections.abc import Callable


class BufferedObjectWriter:
    """Collects bytes in memory and hands them to ``publish`` on close.

    Providers without a native streaming upload use this so that a failed or
    aborted write never replaces the previous object.
    """

    def __init__(self, key: str, publish: Callable[[str, bytes], None]) -> None:
        self.key = key
        self._publish = publish
        self._buffer = io.BytesIO()
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
        self._publish(self.key, self._buffer.getvalue())
        self._buffer.close()

    def abort(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._buffer.close()

    def __enter__(self) -> BufferedObjectWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.abort()
        else:
            self.close()
