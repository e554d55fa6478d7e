"""SQLite storage provider implementations."""

from .object_store import SQLiteObjectStore

__all__ = ["SQLiteObjectStore"]
