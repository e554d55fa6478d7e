"""Filesystem interface — ABC + data classes.

A deliberately small surface: create, append, open and read_dir over
root-relative slash-separated paths.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storage.contracts import ObjectWriter


@dataclass(frozen=True, order=True)
class DirEntry:
    """Single directory entry, synthesized at listing time."""

    name: str
    is_dir: bool = False


class File(ABC):
    """Readable handle returned by :meth:`FileSystem.open`."""

    @abstractmethod
    def read(self, size: int = -1) -> bytes:
        ...

    @abstractmethod
    def close(self) -> None:
        ...

    @abstractmethod
    def read_dir(self, n: int = -1) -> list[DirEntry]:
        """Incremental directory read on an open handle."""
        ...

    def __enter__(self) -> File:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class FileSystem(ABC):
    """Hierarchical filesystem contract.

    Implementations:
    - ObjectFileSystem: directories simulated over a flat object store
    """

    @abstractmethod
    def create(self, name: str) -> ObjectWriter:
        """Open a fresh write stream, replacing any existing file on close."""
        ...

    @abstractmethod
    def append(self, name: str) -> ObjectWriter:
        """Open a write stream positioned after the file's existing content.

        A missing file is treated as empty.
        """
        ...

    @abstractmethod
    def open(self, name: str) -> File:
        """Open a file for reading.

        Raises:
            NotFound: If the file does not exist
        """
        ...

    @abstractmethod
    def read_dir(self, dir: str) -> list[DirEntry]:
        """List the immediate children of a directory, sorted by name.

        Raises:
            NotFound: If the directory does not exist or names a file
        """
        ...
