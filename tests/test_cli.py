"""Command-line console: dashboards, GameMaster actions and exit codes."""

import pytest

import run_quest
from quest import config as quest_config_module
from store import InMemoryCompletionStore

from conftest import FlakyStore


class StopWatching(Exception):
    pass


@pytest.fixture(autouse=True)
def memory_backend(monkeypatch):
    monkeypatch.setenv("QUEST_STORE_BACKEND", "memory")
    monkeypatch.setenv("QUEST_REFRESH_INTERVAL_SECONDS", "5")
    monkeypatch.setattr(quest_config_module, "_settings", None)


@pytest.fixture
def shared_store(monkeypatch):
    store = InMemoryCompletionStore()
    monkeypatch.setattr(run_quest, "create_store", lambda settings: store)
    return store


def line_with(output, text):
    return next(line for line in output.splitlines() if text in line)


def test_dashboard_at_a_fixed_clock(capsys):
    assert run_quest.main(["--group", "1", "--at", "9:10"]) == 0

    out = capsys.readouterr().out
    assert "GROUP 1 SCHEDULE - The Wave Warriors" in out
    kraken = line_with(out, "Kraken's Wrath")
    assert kraken.startswith("➤")
    assert "Active Now" in kraken
    assert "Active Now" not in line_with(out, "Mermaid's Lagoon")
    assert "Activities Completed: 0/7" in out


def test_toggle_writes_and_shows_in_overview(shared_store, capsys):
    assert run_quest.main(["--complete", "3", "mermaids-lagoon", "--gamemaster", "--at", "10:00"]) == 0

    out = capsys.readouterr().out
    assert "Group 3: mermaids-lagoon completed" in out
    assert "(10:00)" in out
    assert "Station 1: Mermaid's Lagoon" in out
    assert shared_store.rows[3] == "mermaids-lagoon"

    assert run_quest.main(["--complete", "3", "mermaids-lagoon"]) == 0
    assert "reopened" in capsys.readouterr().out
    assert shared_store.rows[3] == ""


def test_unknown_activity_exits_non_zero(shared_store):
    assert run_quest.main(["--complete", "3", "walk-the-plank"]) == 1
    assert shared_store.rows == {}


def test_group_off_the_roster_exits_non_zero():
    assert run_quest.main(["--group", "17"]) == 1


def test_partial_reset_all_exits_non_zero(monkeypatch, capsys):
    store = FlakyStore(rows={3: "mermaids-lagoon", 4: "plank-duel"}, fail_groups={3})
    monkeypatch.setattr(run_quest, "create_store", lambda settings: store)

    assert run_quest.main(["--reset-all", "--gamemaster"]) == 1

    out = capsys.readouterr().out
    assert "All groups reset" not in out
    assert "Group 3 was reset but the reset was not saved" in out
    assert store.rows[4] == ""
    assert store.rows[3] == "mermaids-lagoon"


def test_watch_refreshes_on_every_tick(shared_store, monkeypatch, capsys):
    pauses = []

    def fake_sleep(seconds):
        pauses.append(seconds)
        if len(pauses) == 1:
            shared_store.upsert_group_completion(1, {"mermaids-lagoon"})
            return
        raise StopWatching

    monkeypatch.setattr(run_quest.time, "sleep", fake_sleep)

    with pytest.raises(StopWatching):
        run_quest.main(["--group", "1", "--at", "9:10", "--watch"])

    first, second = capsys.readouterr().out.split("GROUP 1 SCHEDULE")[1:]
    assert pauses == [5, 5]
    assert "✅" not in line_with(first, "Mermaid's Lagoon")
    assert "✅" in line_with(second, "Mermaid's Lagoon")
    assert "Activities Completed: 1/7" in second
