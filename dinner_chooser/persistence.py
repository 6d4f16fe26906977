"""Key-value persistence for the dish list."""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol, Sequence

from dinner_chooser.collection import contains_name
from dinner_chooser.config import DB_PATH, STORAGE_KEY
from dinner_chooser.data import default_dishes, dish_from_record
from dinner_chooser.errors import PersistenceError
from dinner_chooser.models import Dish

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Storage collaborator holding opaque string blobs under fixed keys."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, blob: str) -> None: ...


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class SqliteKeyValueStore:
    """A ``KeyValueStore`` backed by a single SQLite table."""

    def __init__(self, db_path: str | Path = DB_PATH) -> None:
        self.db_path = Path(db_path)
        self._schema_ready = False

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        if not self._schema_ready:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )
            self._schema_ready = True
        return conn

    def get(self, key: str) -> str | None:
        try:
            conn = self._connect()
            try:
                row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as exc:
            raise PersistenceError(f"Could not read {key!r} from {self.db_path}: {exc}") from exc
        if row is None:
            return None
        return str(row[0])

    def set(self, key: str, blob: str) -> None:
        try:
            conn = self._connect()
            try:
                with conn:
                    conn.execute(
                        """
                        INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                        ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                        """,
                        (key, blob, _utc_now_iso()),
                    )
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as exc:
            raise PersistenceError(f"Could not write {key!r} to {self.db_path}: {exc}") from exc


def encode_dishes(dishes: Sequence[Dish]) -> str:
    """Serialize dishes as a JSON array of ``{"name", "difficulties"}`` records."""
    return json.dumps([dish.to_record() for dish in dishes], ensure_ascii=False)


def decode_dishes(blob: str) -> list[Dish]:
    """Parse a blob written by ``encode_dishes``."""
    try:
        records = json.loads(blob)
    except json.JSONDecodeError as exc:
        raise PersistenceError(f"Saved dish list is not valid JSON: {exc}") from exc

    if not isinstance(records, list):
        raise PersistenceError(f"Saved dish list must be a JSON array, got {type(records).__name__}")

    dishes: list[Dish] = []
    for record in records:
        try:
            dish = dish_from_record(record)
        except ValueError as exc:
            raise PersistenceError(f"Saved dish list is malformed: {exc}") from exc
        if contains_name(dishes, dish.name):
            raise PersistenceError(f"Saved dish list has {dish.name!r} more than once")
        dishes.append(dish)
    return dishes


def load_dishes(store: KeyValueStore, key: str = STORAGE_KEY) -> tuple[list[Dish], PersistenceError | None]:
    """Load the saved dish list, falling back to the defaults.

    Returns the dishes and, when the fallback was caused by a failure rather
    than by a missing blob, the error to report as a warning.
    """
    try:
        blob = store.get(key)
        if blob is None:
            logger.info("load key=%s missing, using defaults", key)
            return (default_dishes(), None)
        dishes = decode_dishes(blob)
    except PersistenceError as exc:
        logger.warning("load key=%s failed, using defaults: %s", key, exc)
        return (default_dishes(), exc)

    logger.info("load key=%s dishes=%s", key, len(dishes))
    return (dishes, None)


def save_dishes(store: KeyValueStore, dishes: Sequence[Dish], key: str = STORAGE_KEY) -> PersistenceError | None:
    """Persist the dish list; a failure is returned, not raised."""
    try:
        store.set(key, encode_dishes(dishes))
    except PersistenceError as exc:
        logger.warning("save key=%s failed: %s", key, exc)
        return exc

    logger.debug("save key=%s dishes=%s", key, len(dishes))
    return None
