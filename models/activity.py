"""
Activity catalog models for Pirate's Quest.

A station is a single challenge with a fixed physical location.
The untimed finale shared by every group is modelled as a synthetic activity.
"""

from pydantic import BaseModel, Field, ConfigDict


FREE_FOR_ALL_ID = "free-for-all"
FREE_FOR_ALL_ORDER = 9
FREE_FOR_ALL_LOCATION = "—"


class Activity(BaseModel):
    """
    Represents a single station in the quest.
    Timed stations are numbered 1..8; order 9 is reserved for the finale.
    """

    id: str = Field(min_length=1, description="Stable identifier, e.g. 'mermaids-lagoon'")
    theme: str = Field(min_length=1, description="Display name")
    description: str = Field(default="", description="Narrative text shown to participants")
    location: str = Field(description="Short location code, keys the map overlay")
    order: int = Field(ge=1, le=FREE_FOR_ALL_ORDER, description="1-based station number")

    @property
    def is_free_for_all(self) -> bool:
        return self.id == FREE_FOR_ALL_ID

    @property
    def badge(self) -> str:
        """Label shown next to the theme ('Station 3' or 'Final Event')."""
        if self.order == FREE_FOR_ALL_ORDER:
            return "Final Event"
        return f"Station {self.order}"

    @property
    def station_label(self) -> str:
        """'Station 3: Cursed Compass', or 'Final Event: Free For All' for the finale."""
        return f"{self.badge}: {self.theme}"

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "id": "mermaids-lagoon",
            "theme": "Mermaid's Lagoon",
            "description": "Decipher the ancient rebus puzzles left by the sea maidens.",
            "location": "Arc TR",
            "order": 1
        }
    })


def free_for_all_activity() -> Activity:
    """The shared finale every group attends regardless of assignment tables."""
    return Activity(
        id=FREE_FOR_ALL_ID,
        theme="Free For All",
        description=(
            "All groups participate together in the final celebration and prize "
            "distribution ceremony. Gather at the main assembly area for the grand "
            "finale of your pirate adventure!"
        ),
        location=FREE_FOR_ALL_LOCATION,
        order=FREE_FOR_ALL_ORDER,
    )
