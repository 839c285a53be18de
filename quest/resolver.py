"""
The Pirate's Quest Schedule Resolver.

This module turns the static timetable into a group's itinerary:
1. Resolution - which station the group visits in each slot, in time order.
2. Clock annotation - which entry is happening right now.
3. Completion annotation - which entries the group already finished.

Every function is pure: inputs (including completion snapshots) are read,
never mutated or retained.
"""

import logging
from datetime import datetime, time as time_type
from typing import Dict, List, Mapping, Optional, Sequence, Union

from models import (
    Activity,
    ItineraryEntry,
    QuestConfig,
    TimeSlot,
    free_for_all_activity,
    minutes_of_day
)
from .completion import CompletionState, completed_for
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

Clock = Union[datetime, time_type]


def resolve_itinerary(
    group_id: int,
    time_slots: Sequence[TimeSlot],
    catalog: Mapping[int, Activity]
) -> List[ItineraryEntry]:
    """
    Build the ordered itinerary of one group.

    Timed slots contribute the station the group is assigned to; the
    free-for-all slot always contributes the shared finale. The result is
    sorted by slot start (stable, so emission order breaks ties).
    """
    entries: List[ItineraryEntry] = []
    timed_entries = 0

    for slot in time_slots:
        if slot.free_for_all:
            entries.append(ItineraryEntry(
                activity=free_for_all_activity(),
                start_time=slot.start_time,
                end_time=slot.end_time
            ))
            continue

        assigned = False
        for order, groups in slot.activities.items():
            activity = catalog.get(order)
            if activity is None:
                raise ConfigurationError(
                    f"Slot {slot.label} references station {order}, which is not in the catalog"
                )
            if group_id in groups:
                entries.append(ItineraryEntry(
                    activity=activity,
                    start_time=slot.start_time,
                    end_time=slot.end_time
                ))
                timed_entries += 1
                assigned = True

        if not assigned:
            # Data-integrity gap: degrade by leaving the slot out
            logger.debug(f"Group {group_id} has no station during {slot.label}, slot skipped")

    if timed_entries == 0:
        raise ConfigurationError(f"Group {group_id} has no timed assignment in the schedule")

    return sorted(entries, key=lambda e: e.start_minutes)


def annotate_activity(entry: ItineraryEntry, now: Clock) -> ItineraryEntry:
    """Mark the entry active iff start <= now < end (wall clock, minute precision)."""
    current = minutes_of_day(now)
    is_active = entry.start_minutes <= current < entry.end_minutes
    return entry.model_copy(update={"is_active": is_active})


def annotate_completion(
    entry: ItineraryEntry,
    completion_state: Optional[CompletionState],
    group_id: int
) -> ItineraryEntry:
    """Mark the entry completed iff the group's completed set holds its id."""
    is_completed = entry.activity.id in completed_for(completion_state, group_id)
    return entry.model_copy(update={"is_completed": is_completed})


def select_default_activity(itinerary: Sequence[ItineraryEntry]) -> Optional[ItineraryEntry]:
    """
    Initial focus for a participant:
    the active entry, else the first open (not completed, not active) one,
    else the first entry, else None.
    """
    for entry in itinerary:
        if entry.is_active:
            return entry
    for entry in itinerary:
        if not entry.is_completed and not entry.is_active:
            return entry
    return itinerary[0] if itinerary else None


class ScheduleResolver:
    """
    Convenience wrapper binding the resolver functions to one QuestConfig.
    Holds only the immutable configuration.
    """

    def __init__(self, config: QuestConfig):
        self.config = config
        self.catalog: Dict[int, Activity] = config.catalog

    def itinerary(
        self,
        group_id: int,
        now: Optional[Clock] = None,
        completion_state: Optional[CompletionState] = None
    ) -> List[ItineraryEntry]:
        """Resolve, then annotate with the clock (if given) and the completion snapshot."""
        entries = resolve_itinerary(group_id, self.config.time_slots, self.catalog)
        if now is not None:
            entries = [annotate_activity(e, now) for e in entries]
        return [annotate_completion(e, completion_state, group_id) for e in entries]

    def default_activity(
        self,
        group_id: int,
        now: Optional[Clock] = None,
        completion_state: Optional[CompletionState] = None
    ) -> Optional[ItineraryEntry]:
        return select_default_activity(self.itinerary(group_id, now, completion_state))
