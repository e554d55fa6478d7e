"""Configuration schema for bucketfs using Pydantic.

- Root prefix scoping every filesystem operation
- Storage provider selection (memory / sqlite / gcs) with per-provider settings
- Log level validation
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

StorageStrategy = Literal["memory", "sqlite", "gcs"]

# ============================================================================
# Storage Configuration
# ============================================================================


class SQLiteStoreConfig(BaseModel):
    """SQLite object store settings."""

    db_path: Path = Field(Path.home() / ".bucketfs" / "objects.db", description="SQLite database file")


class GCSStoreConfig(BaseModel):
    """Google Cloud Storage settings. Credentials come from the environment (ADC)."""

    bucket: str | None = Field(None, description="Bucket holding the objects")
    project: str | None = Field(None, description="GCP project for the client (falls back to ADC default)")


class StorageConfig(BaseModel):
    strategy: StorageStrategy = Field("memory", description="Object store provider")
    sqlite: SQLiteStoreConfig = Field(default_factory=SQLiteStoreConfig)
    gcs: GCSStoreConfig = Field(default_factory=GCSStoreConfig)

    @field_validator("strategy", mode="before")
    @classmethod
    def normalize_strategy(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v


# ============================================================================
# Top-level Settings
# ============================================================================


class BucketFSSettings(BaseModel):
    """Complete bucketfs configuration."""

    root_prefix: str = Field("", description="Key prefix every logical path is joined onto")
    storage: StorageConfig = Field(default_factory=StorageConfig)
    log_level: str = Field("WARNING", description="Logging level for the CLI")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
