"""In-memory storage provider (tests, scratch use)."""

from .object_store import InMemoryObjectStore

__all__ = ["InMemoryObjectStore"]
