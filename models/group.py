"""
Group and participant models for Pirate's Quest.

Groups are a pure lookup (number -> crew name). Participants are the
authenticated identity handed over by the login layer; only their group
number is used when resolving a schedule.
"""

from pydantic import BaseModel, Field, ConfigDict


class Group(BaseModel):
    """A crew of participants sharing one itinerary."""
    id: int = Field(ge=1, description="Group number")
    name: str = Field(min_length=1, description="Crew display name")

    model_config = ConfigDict(frozen=True)


class Participant(BaseModel):
    """
    Resolved identity record of a logged-in participant.
    `group` is accepted as a number or a numeric string and stored as int.
    """
    id: str = Field(description="Identity provider user id")
    name: str = Field(min_length=1)
    programme: str = Field(default="", description="e.g. 'ASEAN Summer'")
    group: int = Field(ge=1, description="Group number, the resolver's input")

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "id": "5f0c6a3e-4d7b-4a57-9a51-0d1b2c3d4e5f",
            "name": "Anne Bonny",
            "programme": "INSPIRASI",
            "group": "3"
        }
    })
