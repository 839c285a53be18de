"""
Schedule data models for Pirate's Quest.

This module defines the static timetable (TimeSlot) and the derived,
per-group view of it (ItineraryEntry, GroupProgress).
"""

from typing import Dict, FrozenSet, Union
from pydantic import BaseModel, Field, ConfigDict, computed_field, field_validator, model_validator
from datetime import datetime, time as time_type

from .activity import Activity


def parse_clock(value: str) -> time_type:
    """Parse a wall-clock string such as '8:45' or '10:05' (24h)."""
    try:
        hours, minutes = value.strip().split(":")
        return time_type(int(hours), int(minutes))
    except (ValueError, AttributeError) as exc:
        raise ValueError(f"Invalid clock value {value!r}, expected H:MM") from exc


def minutes_of_day(moment: Union[time_type, datetime]) -> int:
    """Minutes since midnight; seconds are ignored."""
    return moment.hour * 60 + moment.minute


def format_clock(moment: time_type) -> str:
    """'8:45' style rendering, hour not zero padded."""
    return f"{moment.hour}:{moment.minute:02d}"


class TimeSlot(BaseModel):
    """
    A fixed wall-clock window of the quest timetable.
    `activities` maps a station order number to the groups sent there.
    """

    start_time: time_type = Field(description="Slot start (local wall clock)")
    end_time: time_type = Field(description="Slot end (exclusive)")
    activities: Dict[int, FrozenSet[int]] = Field(
        default_factory=dict,
        description="Station order number -> group numbers assigned during this slot"
    )
    free_for_all: bool = Field(
        default=False,
        description="True for the final untimed slot shared by every group"
    )

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def parse_clock_strings(cls, v):
        if isinstance(v, str):
            return parse_clock(v)
        return v

    @model_validator(mode="after")
    def validate_window(self):
        if self.start_time >= self.end_time:
            raise ValueError("Slot end time must be strictly after start time")
        if self.free_for_all and any(self.activities.values()):
            raise ValueError("The free-for-all slot cannot assign groups to stations")
        return self

    @property
    def start_minutes(self) -> int:
        return minutes_of_day(self.start_time)

    @property
    def end_minutes(self) -> int:
        return minutes_of_day(self.end_time)

    @property
    def label(self) -> str:
        return f"{format_clock(self.start_time)} - {format_clock(self.end_time)}"

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "start_time": "8:45",
            "end_time": "9:05",
            "activities": {"1": [1, 2], "2": [3, 4]},
            "free_for_all": False
        }
    })


class ItineraryEntry(BaseModel):
    """
    One stop on a group's itinerary.
    Derived on every query and never persisted; annotation returns a copy.
    """

    activity: Activity
    start_time: time_type
    end_time: time_type
    is_active: bool = Field(default=False, description="The slot contains the current time")
    is_completed: bool = Field(default=False, description="The group finished this station")

    @computed_field
    @property
    def time_slot(self) -> str:
        return f"{format_clock(self.start_time)} - {format_clock(self.end_time)}"

    @property
    def start_minutes(self) -> int:
        return minutes_of_day(self.start_time)

    @property
    def end_minutes(self) -> int:
        return minutes_of_day(self.end_time)

    model_config = ConfigDict(frozen=True)


class GroupProgress(BaseModel):
    """Completed timed stations against the fixed denominator."""

    completed_count: int = Field(ge=0)
    total_count: int = Field(ge=0)

    @computed_field
    @property
    def percentage(self) -> float:
        if self.total_count == 0:
            return 0.0
        return round(self.completed_count / self.total_count * 100, 1)

    model_config = ConfigDict(frozen=True)
