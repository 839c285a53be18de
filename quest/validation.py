"""
Static Configuration Validation.

This module answers the question: "Can this catalog and timetable be trusted?"
It enforces physical reality (a group cannot be in two places at once) and
referential integrity between the timetable and the catalog.
"""

from dataclasses import dataclass
from typing import List, Optional

from models import QuestConfig
from .errors import ConfigurationError


@dataclass
class ScheduleViolation:
    """Detailed reason a configuration was rejected."""
    violation_type: str  # e.g., "DoubleBooking", "Overlap", "Catalog"
    reason: str
    slot_label: Optional[str] = None
    group_id: Optional[int] = None


class ScheduleChecker:
    """
    Validates the invariants of a QuestConfig. Collects every violation
    instead of stopping at the first one.
    """

    def __init__(self, config: QuestConfig):
        self.config = config
        self.catalog = config.catalog

    def check(self) -> List[ScheduleViolation]:
        violations: List[ScheduleViolation] = []
        violations.extend(self._check_catalog())
        violations.extend(self._check_references())
        violations.extend(self._check_double_booking())
        violations.extend(self._check_slot_sequence())
        violations.extend(self._check_free_for_all())
        violations.extend(self._check_group_coverage())
        return violations

    def _check_catalog(self) -> List[ScheduleViolation]:
        """Unique ids; orders unique and contiguous from 1."""
        violations = []
        seen_ids = set()
        for activity in self.config.activities:
            if activity.id in seen_ids:
                violations.append(ScheduleViolation("Catalog", f"Duplicate activity id {activity.id!r}"))
            seen_ids.add(activity.id)

        orders = [a.order for a in self.config.activities]
        if len(set(orders)) != len(orders):
            violations.append(ScheduleViolation("Catalog", "Station order numbers are not unique"))
        if sorted(set(orders)) != list(range(1, len(set(orders)) + 1)):
            violations.append(ScheduleViolation("Catalog", f"Station orders {sorted(orders)} are not contiguous from 1"))
        return violations

    def _check_references(self) -> List[ScheduleViolation]:
        violations = []
        for slot in self.config.time_slots:
            for order in slot.activities:
                if order not in self.catalog:
                    violations.append(ScheduleViolation(
                        "Reference",
                        f"Station {order} is not in the catalog",
                        slot_label=slot.label
                    ))
        return violations

    def _check_double_booking(self) -> List[ScheduleViolation]:
        """A group appears in at most one station's set per slot."""
        violations = []
        for slot in self.config.time_slots:
            seen = {}
            for order, groups in sorted(slot.activities.items()):
                for group_id in sorted(groups):
                    if group_id in seen:
                        violations.append(ScheduleViolation(
                            "DoubleBooking",
                            f"Group {group_id} assigned to stations {seen[group_id]} and {order}",
                            slot_label=slot.label,
                            group_id=group_id
                        ))
                    else:
                        seen[group_id] = order
        return violations

    def _check_slot_sequence(self) -> List[ScheduleViolation]:
        """Slots are ordered, contiguous and non-overlapping."""
        violations = []
        slots = self.config.time_slots
        for prev, current in zip(slots, slots[1:]):
            if current.start_minutes < prev.end_minutes:
                violations.append(ScheduleViolation(
                    "Overlap",
                    f"Slot {current.label} starts before {prev.label} ends",
                    slot_label=current.label
                ))
            elif current.start_minutes > prev.end_minutes:
                violations.append(ScheduleViolation(
                    "Gap",
                    f"Gap between {prev.label} and {current.label}",
                    slot_label=current.label
                ))
        return violations

    def _check_free_for_all(self) -> List[ScheduleViolation]:
        """Exactly the final slot is the free-for-all."""
        slots = self.config.time_slots
        if not slots:
            return [ScheduleViolation("FreeForAll", "Timetable is empty")]

        violations = []
        if not slots[-1].free_for_all:
            violations.append(ScheduleViolation(
                "FreeForAll", "Final slot is not the free-for-all", slot_label=slots[-1].label
            ))
        for slot in slots[:-1]:
            if slot.free_for_all:
                violations.append(ScheduleViolation(
                    "FreeForAll", "Only the final slot may be the free-for-all", slot_label=slot.label
                ))
        return violations

    def _check_group_coverage(self) -> List[ScheduleViolation]:
        """Every rostered group has a station in every timed slot."""
        violations = []
        for slot in self.config.time_slots:
            if slot.free_for_all:
                continue
            assigned = set().union(*slot.activities.values()) if slot.activities else set()
            for group_id in self.config.group_ids:
                if group_id not in assigned:
                    violations.append(ScheduleViolation(
                        "Unassigned",
                        f"Group {group_id} has no station",
                        slot_label=slot.label,
                        group_id=group_id
                    ))
        return violations


def ensure_valid_config(config: QuestConfig) -> QuestConfig:
    """Raise ConfigurationError listing every violation, or return the config unchanged."""
    violations = ScheduleChecker(config).check()
    if violations:
        summary = "; ".join(
            f"[{v.violation_type}] {v.slot_label + ': ' if v.slot_label else ''}{v.reason}"
            for v in violations
        )
        raise ConfigurationError(f"Invalid quest configuration: {summary}", violations)
    return config
