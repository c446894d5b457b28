"""
Pydantic model for a player record returned by the trivia backend.

The backend serializes players as Mongo-style documents:

    {"_id": "...", "name": "Ann", "score": 10, "createdAt": "2024-01-05T10:00:00Z"}

Only createdAt is required; the other fields are kept as sent so a
single odd record never hides the whole list.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Player(BaseModel):
    """
    One player entry from the remote source.

    Instances are frozen: a fetched collection never changes after it
    has been parsed.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "_id": "65a7f0c2e4b0a1b2c3d4e5f6",
                "name": "Ann",
                "score": 10,
                "createdAt": "2024-01-05T10:00:00Z"
            }
        },
    )

    id: Optional[Any] = Field(
        None,
        validation_alias=AliasChoices("_id", "id"),
        description="Opaque identifier assigned by the backend"
    )
    name: str = Field("", description="Display label, not guaranteed unique")
    score: Optional[Any] = Field(
        None,
        description="Score as sent, None when the player has no score yet"
    )
    created_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("createdAt", "created_at"),
        description="When the player was created (ISO-8601)"
    )

    @field_validator("name", mode="before")
    @classmethod
    def _name_as_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("created_at")
    @classmethod
    def _assume_local_time(cls, value: datetime) -> datetime:
        # Offset-less timestamps are local time
        if value.tzinfo is None:
            return value.astimezone()
        return value
