"""
Data models package for Pirate's Quest.

This package exports the three pillars of the data architecture:
1. Catalog (Activity and the free-for-all finale)
2. Timetable (TimeSlot, QuestConfig, Group, Participant)
3. Derived views (ItineraryEntry, GroupProgress)
"""

from .activity import (
    Activity,
    FREE_FOR_ALL_ID,
    FREE_FOR_ALL_LOCATION,
    FREE_FOR_ALL_ORDER,
    free_for_all_activity
)

from .group import (
    Group,
    Participant
)

from .schedule import (
    TimeSlot,
    ItineraryEntry,
    GroupProgress,
    format_clock,
    minutes_of_day,
    parse_clock
)

from .quest import QuestConfig

__all__ = [
    # --- Catalog ---
    "Activity",
    "FREE_FOR_ALL_ID",
    "FREE_FOR_ALL_LOCATION",
    "FREE_FOR_ALL_ORDER",
    "free_for_all_activity",

    # --- Timetable & Roster ---
    "TimeSlot",
    "QuestConfig",
    "Group",
    "Participant",

    # --- Derived Views ---
    "ItineraryEntry",
    "GroupProgress",

    # --- Clock Helpers ---
    "format_clock",
    "minutes_of_day",
    "parse_clock",
]
