"""Error hierarchy for schedule resolution and progress tracking.

Configuration defects are fatal to the computation that hits them. Store
failures are transient: callers recover by showing every station as not
completed rather than crashing.
"""

from typing import Dict, Iterable, List, Optional


class QuestError(Exception):
    """Base exception for all Pirate's Quest errors."""

    pass


class ConfigurationError(QuestError):
    """Static catalog or timetable is internally inconsistent.

    Examples: a group with no timed assignment, a slot referencing a station
    order that is missing from the catalog.
    """

    def __init__(self, message: str, violations: Optional[Iterable] = None):
        super().__init__(message)
        self.violations: List = list(violations or [])


class StoreUnavailable(QuestError):
    """Temporary failure talking to the completion store.

    Examples: network timeouts, database locked, backend returned an error.
    """

    pass


class PartialBulkFailure(QuestError):
    """Some per-group writes of a bulk reset failed while others succeeded.

    Local resets already applied are kept; each failure is listed by group.
    """

    def __init__(self, failures: Dict[int, StoreUnavailable], succeeded: Iterable[int] = ()):
        self.failures = dict(failures)
        self.succeeded = sorted(succeeded)
        groups = ", ".join(str(g) for g in sorted(self.failures))
        super().__init__(f"Reset failed for {len(self.failures)} group(s): {groups}")
