from .contracts import ObjectMissing, ObjectReader, ObjectStore, ObjectWriter
from .runtime import build_object_store

__all__ = [
    "ObjectStore",
    "ObjectReader",
    "ObjectWriter",
    "ObjectMissing",
    "build_object_store",
]
