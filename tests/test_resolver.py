"""Itinerary resolution."""

from datetime import time

import pytest

from models import Activity, FREE_FOR_ALL_ID, TimeSlot
from quest import ConfigurationError, ScheduleResolver, resolve_itinerary


def test_first_entry_is_station_one_for_group_one(small_config):
    itinerary = resolve_itinerary(1, small_config.time_slots, small_config.catalog)

    assert itinerary[0].activity.order == 1
    assert itinerary[0].time_slot == "9:00 - 9:20"


def test_small_itinerary_in_time_order(small_config):
    itinerary = resolve_itinerary(3, small_config.time_slots, small_config.catalog)

    assert [e.activity.id for e in itinerary] == ["krakens-wrath", "cursed-compass", FREE_FOR_ALL_ID]
    assert [e.time_slot for e in itinerary] == ["9:00 - 9:20", "9:20 - 9:40", "9:40 - 10:00"]
    assert not any(e.is_active or e.is_completed for e in itinerary)


def test_free_for_all_entry_is_synthetic(small_config):
    finale = resolve_itinerary(2, small_config.time_slots, small_config.catalog)[-1]

    assert finale.activity.id == FREE_FOR_ALL_ID
    assert finale.activity.location == "—"
    assert finale.activity.order == 9
    assert finale.activity.badge == "Final Event"


def test_every_group_ends_with_free_for_all(quest_config):
    for group_id in quest_config.group_ids:
        itinerary = resolve_itinerary(group_id, quest_config.time_slots, quest_config.catalog)

        assert itinerary, f"group {group_id} has an empty itinerary"
        assert itinerary[-1].activity.id == FREE_FOR_ALL_ID
        starts = [e.start_minutes for e in itinerary[:-1]]
        assert starts == sorted(starts)
        assert len(itinerary) == 8


def test_canonical_itinerary_for_group_one(quest_config):
    itinerary = ScheduleResolver(quest_config).itinerary(1)

    assert [e.activity.id for e in itinerary] == [
        "mermaids-lagoon",
        "krakens-wrath",
        "cursed-compass",
        "plank-duel",
        "cannonball-clash",
        "tropical-trickery",
        "blazing-buccaneers",
        FREE_FOR_ALL_ID,
    ]
    assert itinerary[0].time_slot == "8:45 - 9:05"
    assert itinerary[-1].time_slot == "11:05 - 11:25"


def test_slots_given_out_of_order_are_sorted(small_config):
    shuffled = list(reversed(small_config.time_slots))

    itinerary = resolve_itinerary(1, shuffled, small_config.catalog)

    assert [e.time_slot for e in itinerary] == ["9:00 - 9:20", "9:20 - 9:40", "9:40 - 10:00"]


def test_slot_without_assignment_is_skipped(small_config):
    slots = [
        TimeSlot(start_time="9:00", end_time="9:20", activities={1: [1, 2]}),
        TimeSlot(start_time="9:20", end_time="9:40", activities={2: [3, 4]}),
        TimeSlot(start_time="9:40", end_time="10:00", free_for_all=True),
    ]

    itinerary = resolve_itinerary(1, slots, small_config.catalog)

    assert [e.activity.id for e in itinerary] == ["mermaids-lagoon", FREE_FOR_ALL_ID]


def test_group_without_any_assignment_is_a_configuration_error(small_config):
    with pytest.raises(ConfigurationError, match="Group 99"):
        resolve_itinerary(99, small_config.time_slots, small_config.catalog)


def test_dangling_station_reference_is_a_configuration_error(small_config):
    catalog = {1: small_config.catalog[1]}

    with pytest.raises(ConfigurationError, match="station 2"):
        resolve_itinerary(1, small_config.time_slots, catalog)


def test_resolution_does_not_depend_on_catalog_extras(small_config):
    catalog = dict(small_config.catalog)
    catalog[4] = Activity(id="plank-duel", theme="Plank Duel", location="Outside Audi", order=4)

    itinerary = resolve_itinerary(1, small_config.time_slots, catalog)

    assert "plank-duel" not in [e.activity.id for e in itinerary]


def test_resolver_annotates_clock_and_completion(small_config):
    resolver = ScheduleResolver(small_config)
    itinerary = resolver.itinerary(1, now=time(9, 25), completion_state={1: frozenset({"mermaids-lagoon"})})

    assert [e.is_completed for e in itinerary] == [True, False, False]
    assert [e.is_active for e in itinerary] == [False, True, False]
    assert resolver.default_activity(1, now=time(9, 25)).activity.id == "krakens-wrath"
