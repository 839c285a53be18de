"""
Progress Tracker.

This module acts as the 'Memory' of a running console. It holds:
1. The in-process completion snapshot (optimistically updated).
2. The load status shown to the operator (loading / loaded / store error).
3. The notices raised by store failures. Load notices last one fetch cycle;
   a failed write stays noticed until that group is saved.

It serves both the GameMaster overview and the participant dashboard; the
resolver functions only ever see copies of the snapshot.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Dict, FrozenSet, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from models import GroupProgress, ItineraryEntry, Participant, QuestConfig
from . import completion
from .errors import PartialBulkFailure, StoreUnavailable
from .progress import compute_group_progress, fog_of_war
from .resolver import Clock, ScheduleResolver, select_default_activity

if TYPE_CHECKING:
    from store import CompletionStore

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    """What the presentation layer should tell the user about the data."""
    LOADING = "Loading"
    LOADED = "Loaded"
    STORE_ERROR = "StoreError"


class Dashboard(BaseModel):
    """Everything a participant's screen shows for one render cycle."""
    group_id: int
    group_name: str
    itinerary: List[ItineraryEntry]
    selected: Optional[ItineraryEntry] = None
    progress: GroupProgress
    fog_of_war: Dict[str, bool] = Field(default_factory=dict, description="location -> covered")
    status: LoadStatus
    notices: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class GroupOverview(BaseModel):
    """One row of the GameMaster 'All Groups Progress' panel."""
    group_id: int
    group_name: str
    completed_ids: List[str]
    completed_stations: List[str] = Field(default_factory=list, description="'Station N: Theme' labels, in station order")
    progress: GroupProgress

    model_config = ConfigDict(frozen=True)


class ProgressTracker:
    """
    Owns the completion snapshot between fetches and writes changes through
    to the completion store. Store failures never propagate out of refresh,
    toggle or reset_group; they switch the status to STORE_ERROR and add a notice.
    """

    def __init__(self, config: QuestConfig, store: "CompletionStore"):
        self.config = config
        self.store = store
        self.resolver = ScheduleResolver(config)

        self.snapshot: Dict[int, FrozenSet[str]] = completion.empty_state(config.group_ids)
        self.status = LoadStatus.LOADING
        self._load_notices: List[str] = []
        self._unsaved: Dict[int, str] = {}

    # --- Loading ---

    def refresh(self) -> LoadStatus:
        """
        Reload every group's completion from the store.
        On failure every group is shown as not completed for this cycle.
        """
        try:
            rows = self.store.fetch_all()
        except StoreUnavailable as exc:
            logger.error(f"Could not load completion data: {exc}")
            self.snapshot = completion.empty_state(self.config.group_ids)
            self._load_notices = [f"Progress could not be loaded ({exc}); showing all stations as not completed."]
            self.status = LoadStatus.STORE_ERROR
            return self.status

        snapshot = completion.empty_state(self.config.group_ids)
        snapshot.update(completion.normalize_state(rows))
        self.snapshot = snapshot
        self._load_notices = []
        self.status = LoadStatus.STORE_ERROR if self._unsaved else LoadStatus.LOADED
        logger.info(f"Loaded completion data for {len(rows)} group(s)")
        return self.status

    @property
    def notices(self) -> List[str]:
        """Load problems from the last refresh, then unsaved groups in group order."""
        return self._load_notices + [self._unsaved[g] for g in sorted(self._unsaved)]

    def completion_state(self) -> Dict[int, FrozenSet[str]]:
        """A copy of the snapshot, safe to hand to the resolver."""
        return dict(self.snapshot)

    # --- GameMaster actions ---

    def is_completed(self, group_id: int, activity_id: str) -> bool:
        return activity_id in completion.completed_for(self.snapshot, group_id)

    def toggle(self, group_id: int, activity_id: str) -> bool:
        """
        Flip a station for a group. The snapshot changes immediately; the
        store write follows and a failure is only reported, not rolled back.
        Returns the new completed flag.
        """
        self._require_group(group_id)
        try:
            self.config.activity_by_id(activity_id)
        except KeyError:
            raise ValueError(f"Unknown activity {activity_id!r}") from None

        self.snapshot = completion.toggle_activity(self.snapshot, group_id, activity_id)
        now_completed = self.is_completed(group_id, activity_id)
        logger.info(
            f"Group {group_id}: {activity_id} marked {'complete' if now_completed else 'incomplete'}"
        )
        self._write(group_id)
        return now_completed

    def reset_group(self, group_id: int) -> None:
        self._require_group(group_id)
        self.snapshot = completion.reset_group(self.snapshot, group_id)
        logger.info(f"Group {group_id}: progress reset")
        self._write(group_id)

    def reset_all(self) -> None:
        """
        Reset every group locally, then write each group independently.
        Raises PartialBulkFailure listing the groups whose write failed.
        """
        self.snapshot = completion.reset_all(self.snapshot, self.config.group_ids)
        logger.info("Resetting progress for all groups")

        failures: Dict[int, StoreUnavailable] = {}
        succeeded: List[int] = []
        for group_id in self.config.group_ids:
            try:
                self.store.upsert_group_completion(group_id, frozenset())
            except StoreUnavailable as exc:
                logger.error(f"Reset of group {group_id} failed: {exc}")
                failures[group_id] = exc
            else:
                self._saved(group_id)
                succeeded.append(group_id)

        if failures:
            for group_id, exc in failures.items():
                self._unsaved_write(group_id, f"Group {group_id} was reset but the reset was not saved: {exc}")
            raise PartialBulkFailure(failures, succeeded)

    # --- Views ---

    def group_progress(self, group_id: int) -> GroupProgress:
        itinerary = self.resolver.itinerary(group_id, completion_state=self.completion_state())
        return compute_group_progress(itinerary, self.config.timed_station_count)

    def overview(self) -> List[GroupOverview]:
        """Progress of every rostered group, in group order."""
        rows = []
        for group_id in self.config.group_ids:
            done = completion.completed_for(self.snapshot, group_id)
            rows.append(GroupOverview(
                group_id=group_id,
                group_name=self.config.group_name(group_id),
                completed_ids=sorted(done),
                completed_stations=self.station_labels(done),
                progress=self.group_progress(group_id)
            ))
        return rows

    def dashboard(self, who: Union[Participant, int], now: Optional[Clock] = None) -> Dashboard:
        """Build a participant's view for the given moment (defaults to now)."""
        group_id = who.group if isinstance(who, Participant) else who
        if now is None:
            now = datetime.now()

        itinerary = self.resolver.itinerary(group_id, now, self.completion_state())
        return Dashboard(
            group_id=group_id,
            group_name=self.config.group_name(group_id),
            itinerary=itinerary,
            selected=select_default_activity(itinerary),
            progress=compute_group_progress(itinerary, self.config.timed_station_count),
            fog_of_war=fog_of_war(itinerary),
            status=self.status,
            notices=list(self.notices)
        )

    def station_labels(self, activity_ids) -> List[str]:
        """Display labels for completed ids, finale last; unknown ids are skipped."""
        activities = []
        for activity_id in activity_ids:
            try:
                activities.append(self.config.activity_by_id(activity_id))
            except KeyError:
                logger.warning(f"Ignoring unknown activity id {activity_id!r} in completion data")
        return [a.station_label for a in sorted(activities, key=lambda a: a.order)]

    @staticmethod
    def clock(now: Optional[datetime] = None) -> str:
        """Operator clock, 24h HH:MM."""
        return (now or datetime.now()).strftime("%H:%M")

    # --- Internals ---

    def _write(self, group_id: int) -> None:
        try:
            self.store.upsert_group_completion(group_id, completion.completed_for(self.snapshot, group_id))
        except StoreUnavailable as exc:
            logger.error(f"Saving progress for group {group_id} failed: {exc}")
            self._unsaved_write(group_id, f"Progress for group {group_id} was changed but not saved: {exc}")
        else:
            self._saved(group_id)

    def _saved(self, group_id: int) -> None:
        self._unsaved.pop(group_id, None)
        if self.status is LoadStatus.STORE_ERROR and not self.notices:
            self.status = LoadStatus.LOADED

    def _unsaved_write(self, group_id: int, notice: str) -> None:
        self.status = LoadStatus.STORE_ERROR
        self._unsaved[group_id] = notice

    def _require_group(self, group_id: int) -> None:
        if group_id not in self.config.group_ids:
            raise ValueError(f"Unknown group {group_id}")
