"""In-process completion store, for tests and offline demos."""

from typing import Dict, FrozenSet, Iterable

from quest.completion import decode_completed, encode_completed
from .base import CompletionStore


class InMemoryCompletionStore(CompletionStore):
    """Keeps rows in the persisted string encoding, like the real tables do."""

    def __init__(self, rows: Dict[int, str] = None):
        self.rows: Dict[int, str] = dict(rows or {})

    def fetch_all(self) -> Dict[int, FrozenSet[str]]:
        return {group_id: decode_completed(raw) for group_id, raw in self.rows.items()}

    def upsert_group_completion(self, group_id: int, completed: Iterable[str]) -> None:
        self.rows[int(group_id)] = encode_completed(completed)
