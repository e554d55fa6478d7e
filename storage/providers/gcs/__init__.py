"""Google Cloud Storage provider."""

from .object_store import GCSObjectStore

__all__ = ["GCSObjectStore"]
