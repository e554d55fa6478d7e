"""Configuration management for bucketfs."""

from .loader import ConfigLoader, load_config
from .schema import BucketFSSettings, GCSStoreConfig, SQLiteStoreConfig, StorageConfig

__all__ = [
    "BucketFSSettings",
    "StorageConfig",
    "SQLiteStoreConfig",
    "GCSStoreConfig",
    "ConfigLoader",
    "load_config",
]
