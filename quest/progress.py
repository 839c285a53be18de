"""
Progress and map coverage for a group's itinerary.

Progress counts finished timed stations against a fixed denominator.
Coverage decides which map locations stay under the fog-of-war overlay.
"""

from typing import Dict, Sequence

from models import GroupProgress, ItineraryEntry

DEFAULT_TIMED_STATIONS = 7


def compute_group_progress(
    itinerary: Sequence[ItineraryEntry],
    total_count: int = DEFAULT_TIMED_STATIONS
) -> GroupProgress:
    """
    Completed timed stations out of `total_count`.

    The denominator is a constant rather than len(itinerary) so a partial
    itinerary cannot report an inflated percentage.
    """
    completed = sum(
        1 for entry in itinerary
        if entry.is_completed and not entry.activity.is_free_for_all
    )
    total = max(0, total_count)
    return GroupProgress(completed_count=min(completed, total), total_count=total)


def is_location_covered(location: str, itinerary: Sequence[ItineraryEntry]) -> bool:
    """True iff some entry at `location` is still open. Unknown locations are uncovered."""
    return any(
        entry.activity.location == location and not entry.is_completed
        for entry in itinerary
    )


def fog_of_war(itinerary: Sequence[ItineraryEntry]) -> Dict[str, bool]:
    """Coverage of every located station on the itinerary (finale excluded)."""
    locations = [
        entry.activity.location for entry in itinerary
        if not entry.activity.is_free_for_all
    ]
    return {location: is_location_covered(location, itinerary) for location in dict.fromkeys(locations)}
