# -*- coding: utf-8 -*-
"""Key-value storage port and its backends.

Every store receives one of these in its constructor instead of reaching for
a global. ``MemoryKeyValueStore`` backs the tests; ``SQLiteKeyValueStore`` is
the on-device backend.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Protocol

from .app_db import db_conn, init_app_db

logger = logging.getLogger(__name__)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[bytes]: ...

    def set(self, key: str, value: bytes) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryKeyValueStore:
    """Dict-backed store, used by tests and previews."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None) -> None:
        self._data: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data.keys())


class SQLiteKeyValueStore:
    """Single-table SQLite store. Opening it creates the table if needed."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        init_app_db(self.db_path)
        logger.info("Key-value store initialized at %s", self.db_path)

    def get(self, key: str) -> Optional[bytes]:
        with db_conn(self.db_path) as conn:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        if not row:
            return None
        value = row["value"]
        return value.encode("utf-8") if isinstance(value, str) else bytes(value)

    def set(self, key: str, value: bytes) -> None:
        with db_conn(self.db_path) as conn:
            conn.execute(
                """
                INSERT INTO kv (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (key, bytes(value), _utc_now()),
            )

    def remove(self, key: str) -> None:
        with db_conn(self.db_path) as conn:
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
