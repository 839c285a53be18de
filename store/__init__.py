"""
Completion store backends for Pirate's Quest.
"""

from quest.config import QuestSettings
from .base import CompletionStore
from .memory import InMemoryCompletionStore
from .sqlite import SqliteCompletionStore
from .supabase_store import SupabaseCompletionStore, connect


def create_store(settings: QuestSettings) -> CompletionStore:
    """Pick the backend named by `settings.store_backend`."""
    if settings.store_backend == "memory":
        return InMemoryCompletionStore()
    if settings.store_backend == "supabase":
        if not (settings.supabase_url and settings.supabase_key):
            raise ValueError("QUEST_SUPABASE_URL and QUEST_SUPABASE_KEY must be set for the supabase backend")
        return connect(settings.supabase_url, settings.supabase_key, settings.supabase_table)
    return SqliteCompletionStore(settings.sqlite_path)


__all__ = [
    "CompletionStore",
    "InMemoryCompletionStore",
    "SqliteCompletionStore",
    "SupabaseCompletionStore",
    "create_store",
]
