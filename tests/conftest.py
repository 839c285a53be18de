"""Shared fixtures: a small hand-checked quest, the canonical quest, and stores."""

import pytest

from dataset import build_quest_config, load_quest_config
from quest.errors import StoreUnavailable
from store import InMemoryCompletionStore

FIXTURE_ACTIVITIES = [
    {"id": "mermaids-lagoon", "theme": "Mermaid's Lagoon", "location": "Arc TR", "order": 1},
    {"id": "krakens-wrath", "theme": "Kraken's Wrath", "location": "LWN", "order": 2},
    {"id": "cursed-compass", "theme": "Cursed Compass", "location": "AIA", "order": 3},
]

FIXTURE_SLOTS = [
    {"start_time": "9:00", "end_time": "9:20", "activities": {1: [1, 2], 2: [3, 4], 3: []}},
    {"start_time": "9:20", "end_time": "9:40", "activities": {1: [], 2: [1, 2], 3: [3, 4]}},
    {"start_time": "9:40", "end_time": "10:00", "activities": {1: [], 2: [], 3: []}, "free_for_all": True},
]

FIXTURE_GROUPS = {1: "The Wave Warriors", 2: "The Tidal Titans", 3: "The Freewind Pirates", 4: "The Treasure Trackers"}


class FlakyStore(InMemoryCompletionStore):
    """In-memory store that can be told to fail reads or writes for some groups."""

    def __init__(self, rows=None, fail_fetch=False, fail_groups=()):
        super().__init__(rows)
        self.fail_fetch = fail_fetch
        self.fail_groups = set(fail_groups)
        self.writes = []

    def fetch_all(self):
        if self.fail_fetch:
            raise StoreUnavailable("connection refused")
        return super().fetch_all()

    def upsert_group_completion(self, group_id, completed):
        self.writes.append(group_id)
        if group_id in self.fail_groups:
            raise StoreUnavailable(f"timeout writing group {group_id}")
        super().upsert_group_completion(group_id, completed)


@pytest.fixture
def small_config():
    return build_quest_config(
        activities=FIXTURE_ACTIVITIES,
        time_slots=FIXTURE_SLOTS,
        groups=FIXTURE_GROUPS,
        programmes=["INSPIRASI"],
        timed_station_count=2
    )


@pytest.fixture
def quest_config():
    return load_quest_config()


@pytest.fixture
def memory_store():
    return InMemoryCompletionStore()
