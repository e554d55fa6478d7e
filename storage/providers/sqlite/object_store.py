"""SQLite-backed object store: one row per key."""

from __future__ import annotations

import io
import sqlite3
import time
from pathlib import Path

from storage.contracts import ObjectMissing
from storage.models import BufferedObjectWriter


class SQLiteObjectStore:
    """Flat key/blob table. Keys carry no structure as far as SQLite is concerned."""

    missing_errors: tuple[type[BaseException], ...] = (ObjectMissing,)

    def __init__(self, db_path: Path | str | None = None) -> None:
        if db_path is None:
            db_path = Path.home() / ".bucketfs" / "objects.db"
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_table()

    def open_writer(self, key: str) -> BufferedObjectWriter:
        return BufferedObjectWriter(key, self._put)

    def open_reader(self, key: str) -> io.BytesIO:
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute("SELECT data FROM objects WHERE key = ?", (key,)).fetchone()
        if row is None:
            raise ObjectMissing(key)
        return io.BytesIO(bytes(row[0]))

    def list_keys(self, prefix: str) -> list[str]:
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                """
                SELECT key FROM objects
                WHERE substr(key, 1, ?) = ?
                ORDER BY key ASC
                """,
                (len(prefix), prefix),
            )
            return [row[0] for row in cursor.fetchall()]

    def close(self) -> None:
        """Compatibility no-op for protocol parity."""
        return None

    def _put(self, key: str, data: bytes) -> None:
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                """
                INSERT INTO objects (key, data, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    data = excluded.data,
                    updated_at = excluded.updated_at
                """,
                (key, sqlite3.Binary(data), time.time()),
            )
            conn.commit()

    def _ensure_table(self) -> None:
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS objects (
                    key TEXT PRIMARY KEY,
                    data BLOB NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
