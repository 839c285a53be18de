"""
Static quest configuration.

Bundles the activity catalog, the timetable and the group roster into one
immutable value, built once at startup and injected wherever it is needed.
"""

from typing import Dict, List, Tuple
from pydantic import BaseModel, Field, ConfigDict

from .activity import FREE_FOR_ALL_ID, Activity, free_for_all_activity
from .group import Group
from .schedule import TimeSlot


class QuestConfig(BaseModel):
    """Catalog + timetable + roster. Never mutated after construction."""

    activities: Tuple[Activity, ...] = Field(description="Timed stations")
    time_slots: Tuple[TimeSlot, ...] = Field(description="Full ordered timetable")
    groups: Tuple[Group, ...] = Field(default=(), description="Group roster")
    programmes: Tuple[str, ...] = Field(default=(), description="Programmes participants may enrol in")

    timed_station_count: int = Field(
        default=7,
        ge=1,
        description="Denominator of group progress (free-for-all excluded)"
    )

    @property
    def catalog(self) -> Dict[int, Activity]:
        """Activities indexed by order number."""
        return {a.order: a for a in self.activities}

    @property
    def activity_ids(self) -> List[str]:
        return [a.id for a in sorted(self.activities, key=lambda a: a.order)]

    @property
    def group_ids(self) -> List[int]:
        return sorted(g.id for g in self.groups)

    def group_name(self, group_id: int) -> str:
        for group in self.groups:
            if group.id == group_id:
                return group.name
        return f"Group {group_id}"

    def activity_by_id(self, activity_id: str) -> Activity:
        """Catalog lookup by id; the finale resolves too. Raises KeyError otherwise."""
        if activity_id == FREE_FOR_ALL_ID:
            return free_for_all_activity()
        for activity in self.activities:
            if activity.id == activity_id:
                return activity
        raise KeyError(activity_id)

    model_config = ConfigDict(frozen=True)
