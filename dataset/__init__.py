"""
Static configuration loader for Pirate's Quest.

The tables in `pirates_quest` are validated and frozen into a QuestConfig
once per process; every caller shares that instance.
"""

import logging
from functools import lru_cache
from typing import Any, Dict

from pydantic import ValidationError

from models import Activity, Group, Participant, QuestConfig, TimeSlot
from quest.errors import ConfigurationError
from quest.validation import ensure_valid_config
from . import pirates_quest

logger = logging.getLogger(__name__)


def build_quest_config(
    activities=pirates_quest.ACTIVITIES,
    time_slots=pirates_quest.TIME_SLOTS,
    groups: Dict[int, str] = pirates_quest.GROUPS,
    programmes=pirates_quest.PROGRAMMES,
    timed_station_count: int = pirates_quest.TIMED_STATION_COUNT
) -> QuestConfig:
    """Validate raw tables into a QuestConfig; raises ConfigurationError on any defect."""
    try:
        config = QuestConfig(
            activities=[Activity(**item) for item in activities],
            time_slots=[TimeSlot(**item) for item in time_slots],
            groups=[Group(id=gid, name=name) for gid, name in sorted(groups.items())],
            programmes=list(programmes),
            timed_station_count=timed_station_count
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Malformed quest data: {exc}") from exc
    return ensure_valid_config(config)


@lru_cache(maxsize=1)
def load_quest_config() -> QuestConfig:
    """The canonical configuration, built on first use."""
    config = build_quest_config()
    logger.info(
        f"Quest configuration loaded: {len(config.activities)} stations, "
        f"{len(config.time_slots)} slots, {len(config.groups)} groups"
    )
    return config


def participant(record: Dict[str, Any], config: QuestConfig = None) -> Participant:
    """
    Build a Participant from an identity record ({id, name, programme, group}
    or the stored `group_id` column). The group must be on the roster and a
    non-empty programme must be one the quest offers.
    """
    if config is None:
        config = load_quest_config()
    data = dict(record)
    if "group" not in data and "group_id" in data:
        data["group"] = data.pop("group_id")
    person = Participant(**data)
    if person.group not in config.group_ids:
        raise ValueError(f"Group {person.group} is not on the roster")
    if person.programme and person.programme not in config.programmes:
        raise ValueError(
            f"Unknown programme {person.programme!r}; expected one of {', '.join(config.programmes)}"
        )
    return person


__all__ = [
    "build_quest_config",
    "load_quest_config",
    "participant",
]
