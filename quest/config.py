"""Runtime settings loaded from environment variables.

Static quest data (catalog, timetable, roster) lives in the `dataset`
package; this only covers where completion state is kept and how the
process behaves.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class QuestSettings(BaseSettings):
    """Settings read from QUEST_* environment variables or a local .env file."""

    # Completion store
    store_backend: Literal["memory", "sqlite", "supabase"] = Field(
        default="sqlite",
        description="Where completion state is persisted",
    )
    sqlite_path: str = Field(
        default="quest.db",
        description="SQLite database file for the sqlite backend",
    )
    supabase_url: str = Field(
        default="",
        description="Supabase project URL for the supabase backend",
    )
    supabase_key: str = Field(
        default="",
        description="Supabase API key for the supabase backend",
    )
    supabase_table: str = Field(
        default="groups",
        description="Table holding one completion row per group",
    )

    # Dashboard clock tick
    refresh_interval_seconds: int = Field(
        default=60,
        ge=1,
        description="How often the dashboard is re-annotated with the current time",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "QUEST_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_settings: QuestSettings | None = None


def get_settings() -> QuestSettings:
    """Get the settings singleton."""
    global _settings
    if _settings is None:
        _settings = QuestSettings()
    return _settings
