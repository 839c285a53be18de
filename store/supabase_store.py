"""Supabase-backed completion store.

Talks to the hosted `groups` table: `group_id` (int, unique) and
`tasks_complete` (comma-joined activity ids).
"""

import logging
from typing import Any, Dict, FrozenSet, Iterable

from supabase import create_client

from quest.completion import decode_completed, encode_completed
from quest.errors import StoreUnavailable
from .base import CompletionStore

logger = logging.getLogger(__name__)


class SupabaseCompletionStore(CompletionStore):
    """Wraps a supabase `Client` (or anything exposing the same query builder)."""

    def __init__(self, client: Any, table: str = "groups"):
        self.client = client
        self.table = table

    def fetch_all(self) -> Dict[int, FrozenSet[str]]:
        try:
            resp = self.client.table(self.table).select("*").execute()
        except Exception as exc:
            logger.exception(f"Supabase {self.table} fetch failed: {exc}")
            raise StoreUnavailable(f"Failed to read completion data: {exc}") from exc

        rows = getattr(resp, "data", None) or []
        completion = {}
        for row in rows:
            if row.get("group_id") is None:
                continue
            raw = row.get("tasks_complete")
            completion[int(row["group_id"])] = decode_completed(raw if isinstance(raw, str) else None)
        return completion

    def upsert_group_completion(self, group_id: int, completed: Iterable[str]) -> None:
        payload = {
            "group_id": int(group_id),
            "tasks_complete": encode_completed(completed),
        }
        try:
            self.client.table(self.table).upsert(payload, on_conflict="group_id").execute()
        except Exception as exc:
            logger.exception(f"Supabase {self.table} upsert failed for group {group_id}: {exc}")
            raise StoreUnavailable(f"Failed to save completion data: {exc}") from exc


def connect(url: str, key: str, table: str = "groups") -> SupabaseCompletionStore:
    """Create a Supabase client and wrap it."""
    return SupabaseCompletionStore(create_client(url, key), table=table)
