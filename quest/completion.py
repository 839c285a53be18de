"""
Completion State.

Which stations each group has finished, plus the flat-string encoding the
store persists it in. Every transition here returns a new mapping; the
snapshot passed in is never mutated.
"""

from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Union

DELIMITER = ","

# group number -> completed activity ids
CompletionState = Mapping[Union[int, str], FrozenSet[str]]


def encode_completed(activity_ids: Iterable[str]) -> str:
    """
    Serialize a set of activity ids to the persisted comma-joined field.
    No escaping is performed, so ids that are empty or contain the delimiter
    are rejected.
    """
    ids = set(activity_ids)
    for activity_id in ids:
        if not activity_id:
            raise ValueError("Activity id must not be empty")
        if DELIMITER in activity_id:
            raise ValueError(f"Activity id {activity_id!r} contains the delimiter {DELIMITER!r}")
    return DELIMITER.join(sorted(ids))


def decode_completed(raw: Optional[str]) -> FrozenSet[str]:
    """Inverse of encode_completed. None and '' both mean nothing completed."""
    if not raw:
        return frozenset()
    return frozenset(part for part in raw.split(DELIMITER) if part)


def completed_for(state: Optional[CompletionState], group_id: int) -> FrozenSet[str]:
    """
    The group's completed ids, or an empty set if the group is absent.
    Rows keyed by the string form of the group number are accepted too.
    """
    if not state:
        return frozenset()
    if group_id in state:
        return frozenset(state[group_id])
    key = str(group_id)
    if key in state:
        return frozenset(state[key])
    return frozenset()


def empty_state(group_ids: Iterable[int]) -> Dict[int, FrozenSet[str]]:
    """Every group present, nothing completed."""
    return {group_id: frozenset() for group_id in group_ids}


def normalize_state(state: CompletionState) -> Dict[int, FrozenSet[str]]:
    """Int keys and frozenset values, whatever the input used."""
    return {int(group_id): frozenset(ids) for group_id, ids in state.items()}


def toggle_activity(state: CompletionState, group_id: int, activity_id: str) -> Dict[int, FrozenSet[str]]:
    """Flip one station for one group."""
    updated = normalize_state(state)
    current = completed_for(updated, group_id)
    if activity_id in current:
        updated[group_id] = current - {activity_id}
    else:
        updated[group_id] = current | {activity_id}
    return updated


def reset_group(state: CompletionState, group_id: int) -> Dict[int, FrozenSet[str]]:
    updated = normalize_state(state)
    updated[group_id] = frozenset()
    return updated


def reset_all(state: CompletionState, group_ids: Iterable[int]) -> Dict[int, FrozenSet[str]]:
    updated = normalize_state(state)
    updated.update(empty_state(group_ids))
    return updated
