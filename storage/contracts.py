"""Provider-neutral object store contracts.

An object store is a flat namespace of byte blobs addressed by string keys.
It has no directories; anything that looks like one is derived from key prefixes
by the layer above.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import TracebackType
from typing import Protocol, runtime_checkable


class ObjectMissing(LookupError):
    """Raised by providers without a native "no such object" error."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"object not found: {self.key!r}"


@runtime_checkable
class ObjectWriter(Protocol):
    """Write stream for a single key. Nothing is published until close()."""

    @property
    def closed(self) -> bool: ...

    def write(self, data: bytes) -> int: ...

    def close(self) -> None: ...

    def abort(self) -> None:
        """Discard buffered bytes without publishing the object."""
        ...

    def __enter__(self) -> ObjectWriter: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Publish on a clean exit, abort when the block raised."""
        ...


@runtime_checkable
class ObjectReader(Protocol):
    def read(self, size: int = -1) -> bytes: ...

    def close(self) -> None: ...


@runtime_checkable
class ObjectStore(Protocol):
    """Minimal capability set consumed by the filesystem layer."""

    # Exception types meaning "this key does not exist" for the provider.
    missing_errors: tuple[type[BaseException], ...]

    def open_writer(self, key: str) -> ObjectWriter: ...

    def open_reader(self, key: str) -> ObjectReader: ...

    def list_keys(self, prefix: str) -> Iterable[str]: ...

    def close(self) -> None: ...
