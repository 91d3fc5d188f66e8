"""Key-value persistence for client-side state."""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from storefront.config import resolve_cart_db_path

logger = logging.getLogger(__name__)


class Storage(Protocol):
    """Opaque durable key-value store. Last write wins."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """Process-local storage, used when nothing durable is wanted."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._values.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove_item(self, key: str) -> None:
        self._values.pop(key, None)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class SqliteStorage:
    """SQLite-backed key-value store."""

    def __init__(self, db_path: str | Path | None = None) -> None:
        self.db_path = Path(db_path or resolve_cart_db_path())
        self._bootstrapped = False

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        if not self._bootstrapped:
            self._bootstrap_schema(conn)
        return conn

    def _bootstrap_schema(self, conn: sqlite3.Connection) -> None:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );
            """
        )
        self._bootstrapped = True

    def get_item(self, key: str) -> str | None:
        conn = self._connect()
        try:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        return None if row is None else str(row[0])

    def set_item(self, key: str, value: str) -> None:
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                    """,
                    (key, value, _utc_now_iso()),
                )
        finally:
            conn.close()

    def remove_item(self, key: str) -> None:
        conn = self._connect()
        try:
            with conn:
                conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        finally:
            conn.close()


def read_safely(storage: Storage, key: str) -> str | None:
    """Read a value, logging and returning None if the store is unusable."""
    try:
        return storage.get_item(key)
    except Exception as exc:
        logger.warning("storage read failed key=%s error=%r", key, exc)
        return None


def write_safely(storage: Storage, key: str, value: str) -> bool:
    """Write a value, logging failures instead of raising."""
    try:
        storage.set_item(key, value)
    except Exception as exc:
        logger.warning("storage write failed key=%s error=%r", key, exc)
        return False
    return True
