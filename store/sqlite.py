"""SQLite helpers for persisting group completion."""
from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Union

from quest.completion import decode_completed, encode_completed
from quest.errors import StoreUnavailable
from .base import CompletionStore

logger = logging.getLogger(__name__)


class SqliteCompletionStore(CompletionStore):
    """One row per group: (group_id, tasks_complete) with the comma-joined ids."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def get_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    def ensure_db(self) -> None:
        """Create the table if it does not exist yet."""
        try:
            with self.get_connection() as conn:
                _create_tables(conn)
        except sqlite3.Error as exc:
            raise StoreUnavailable(f"Cannot initialise {self.path}: {exc}") from exc

    def fetch_all(self) -> Dict[int, FrozenSet[str]]:
        try:
            with self.get_connection() as conn:
                _create_tables(conn)
                rows = conn.execute(
                    "SELECT group_id, tasks_complete FROM groups ORDER BY group_id"
                ).fetchall()
        except sqlite3.Error as exc:
            logger.exception(f"SQLite completion fetch failed: {exc}")
            raise StoreUnavailable(f"Failed to read completion data: {exc}") from exc
        return {row["group_id"]: decode_completed(row["tasks_complete"]) for row in rows}

    def upsert_group_completion(self, group_id: int, completed: Iterable[str]) -> None:
        encoded = encode_completed(completed)
        try:
            with self.get_connection() as conn:
                _create_tables(conn)
                conn.execute(
                    """
                    INSERT INTO groups (group_id, tasks_complete)
                    VALUES (?, ?)
                    ON CONFLICT(group_id) DO UPDATE SET tasks_complete = excluded.tasks_complete
                    """,
                    (int(group_id), encoded),
                )
        except sqlite3.Error as exc:
            logger.exception(f"SQLite completion upsert failed for group {group_id}: {exc}")
            raise StoreUnavailable(f"Failed to save completion data: {exc}") from exc


def _create_tables(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS groups (
            group_id INTEGER PRIMARY KEY,
            tasks_complete TEXT NOT NULL DEFAULT ''
        )
        """
    )
