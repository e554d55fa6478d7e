"""Filesystem-level errors and the backend "missing object" mapping."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from storage.contracts import ObjectStore


class BucketFSError(Exception):
    """Base class for errors raised by the filesystem layer itself."""


class NotFound(BucketFSError, FileNotFoundError):
    """A logical file or directory does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"not found: {self.path!r}"


class Unsupported(BucketFSError, NotImplementedError):
    """Operation has no meaning for a stream over a flat object store."""


@contextmanager
def map_missing(store: ObjectStore, path: str) -> Iterator[None]:
    """Re-raise the store's "no such object" errors as :class:`NotFound`.

    Every other exception passes through untouched.
    """
    try:
        yield
    except store.missing_errors as exc:
        raise NotFound(path) from exc
