"""
Schedule resolution and progress tracking for Pirate's Quest.
"""

from .completion import (
    decode_completed,
    encode_completed,
    completed_for,
    empty_state
)
from .errors import (
    QuestError,
    ConfigurationError,
    StoreUnavailable,
    PartialBulkFailure
)
from .progress import (
    compute_group_progress,
    is_location_covered,
    fog_of_war
)
from .resolver import (
    ScheduleResolver,
    resolve_itinerary,
    annotate_activity,
    annotate_completion,
    select_default_activity
)
from .tracker import (
    Dashboard,
    GroupOverview,
    LoadStatus,
    ProgressTracker
)
from .validation import (
    ScheduleChecker,
    ScheduleViolation,
    ensure_valid_config
)

__all__ = [
    # --- Resolver ---
    "ScheduleResolver",
    "resolve_itinerary",
    "annotate_activity",
    "annotate_completion",
    "select_default_activity",

    # --- Progress & Map ---
    "compute_group_progress",
    "is_location_covered",
    "fog_of_war",

    # --- Completion State ---
    "decode_completed",
    "encode_completed",
    "completed_for",
    "empty_state",

    # --- Tracking ---
    "Dashboard",
    "GroupOverview",
    "LoadStatus",
    "ProgressTracker",

    # --- Validation ---
    "ScheduleChecker",
    "ScheduleViolation",
    "ensure_valid_config",

    # --- Errors ---
    "QuestError",
    "ConfigurationError",
    "StoreUnavailable",
    "PartialBulkFailure",
]
