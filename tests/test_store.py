"""Completion store backends."""

import pytest

from quest import StoreUnavailable
from quest.config import QuestSettings
from store import (
    InMemoryCompletionStore,
    SqliteCompletionStore,
    SupabaseCompletionStore,
    create_store
)


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.operation = None

    def select(self, columns):
        self.operation = ("select", columns)
        return self

    def upsert(self, payload, on_conflict=None):
        self.operation = ("upsert", payload, on_conflict)
        return self

    def execute(self):
        if self.client.fail:
            raise ConnectionError("connection reset by peer")
        self.client.calls.append((self.table,) + self.operation)
        if self.operation[0] == "select":
            return FakeResponse(list(self.client.rows.values()))
        payload = self.operation[1]
        self.client.rows[payload["group_id"]] = payload
        return FakeResponse([payload])


class FakeSupabaseClient:
    """Mimics the query-builder surface of supabase.Client."""

    def __init__(self, rows=None, fail=False):
        self.rows = dict(rows or {})
        self.fail = fail
        self.calls = []

    def table(self, name):
        return FakeQuery(self, name)


def test_memory_store_keeps_encoded_rows(memory_store):
    memory_store.upsert_group_completion(3, {"plank-duel", "cursed-compass"})

    assert memory_store.rows == {3: "cursed-compass,plank-duel"}
    assert memory_store.fetch_all() == {3: frozenset({"plank-duel", "cursed-compass"})}


def test_sqlite_store_upsert_is_idempotent(tmp_path):
    store = SqliteCompletionStore(tmp_path / "quest.db")
    store.ensure_db()

    store.upsert_group_completion(2, {"mermaids-lagoon"})
    store.upsert_group_completion(2, {"mermaids-lagoon"})
    store.upsert_group_completion(7, set())

    assert store.fetch_all() == {2: frozenset({"mermaids-lagoon"}), 7: frozenset()}


def test_sqlite_store_replaces_the_full_set(tmp_path):
    store = SqliteCompletionStore(tmp_path / "quest.db")

    store.upsert_group_completion(2, {"mermaids-lagoon", "krakens-wrath"})
    store.upsert_group_completion(2, set())

    assert store.fetch_all() == {2: frozenset()}


def test_sqlite_store_reports_unavailable(tmp_path):
    store = SqliteCompletionStore(tmp_path / "missing" / "quest.db")

    with pytest.raises(StoreUnavailable):
        store.fetch_all()
    with pytest.raises(StoreUnavailable):
        store.upsert_group_completion(1, set())


def test_supabase_store_reads_rows():
    client = FakeSupabaseClient(rows={
        1: {"group_id": 1, "tasks_complete": "mermaids-lagoon,krakens-wrath"},
        2: {"group_id": 2, "tasks_complete": ""},
        3: {"group_id": 3, "tasks_complete": None},
    })

    completion = SupabaseCompletionStore(client).fetch_all()

    assert completion == {
        1: frozenset({"mermaids-lagoon", "krakens-wrath"}),
        2: frozenset(),
        3: frozenset(),
    }


def test_supabase_store_upserts_on_group_id():
    client = FakeSupabaseClient()

    SupabaseCompletionStore(client, table="groups").upsert_group_completion(4, {"plank-duel"})

    assert client.calls == [("groups", "upsert", {"group_id": 4, "tasks_complete": "plank-duel"}, "group_id")]


def test_supabase_transport_errors_become_store_unavailable():
    store = SupabaseCompletionStore(FakeSupabaseClient(fail=True))

    with pytest.raises(StoreUnavailable):
        store.fetch_all()
    with pytest.raises(StoreUnavailable):
        store.upsert_group_completion(1, set())


def test_create_store_picks_backend(tmp_path):
    memory = create_store(QuestSettings(store_backend="memory"))
    sqlite = create_store(QuestSettings(store_backend="sqlite", sqlite_path=str(tmp_path / "q.db")))

    assert isinstance(memory, InMemoryCompletionStore)
    assert isinstance(sqlite, SqliteCompletionStore)


def test_supabase_backend_requires_credentials():
    with pytest.raises(ValueError, match="QUEST_SUPABASE_URL"):
        create_store(QuestSettings(store_backend="supabase", supabase_url="", supabase_key=""))
