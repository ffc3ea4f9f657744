"""
Trip information models: the stored record of a place visited on a trip
and the sparse update request that patches it
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Transportation(str, Enum):
    """How the traveller gets to the place"""

    WALK = "WALK"
    BICYCLE = "BICYCLE"
    CAR = "CAR"
    TAXI = "TAXI"
    BUS = "BUS"
    SUBWAY = "SUBWAY"
    TRAIN = "TRAIN"
    FLIGHT = "FLIGHT"
    SHIP = "SHIP"
    ETC = "ETC"


# Fields an update request may change, named as they are stored
UPDATABLE_FIELDS = ("place_id", "visit_time", "duration", "transportation", "cost", "notes")


class TripInformation(BaseModel):
    """
    Trip information model for MongoDB storage
    One place visited within a trip schedule
    """

    trip_information_id: int = Field(..., description="Trip information ID")
    trip_schedule_id: int | None = Field(None, description="Owning trip schedule ID")
    place_id: int = Field(..., description="Visited place ID")
    visit_time: datetime | None = Field(None, description="Planned visit time")
    duration: int | None = Field(None, description="Time spent at the place, in minutes")
    transportation: Transportation | None = Field(None, description="Transport mode to the place")
    cost: int = Field(default=0, description="Cost of the visit")
    notes: str | None = Field(None, description="Free-form notes")
    priority: int = Field(default=0, description="Display order within the schedule")
    is_visited: bool = Field(default=False, description="Whether the place has been visited")

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        use_enum_values = True
        json_schema_extra = {
            "example": {
                "trip_information_id": 7,
                "trip_schedule_id": 3,
                "place_id": 42,
                "visit_time": "2024-06-01T10:00:00",
                "duration": 90,
                "transportation": "SUBWAY",
                "cost": 15000,
                "notes": "Buy tickets online",
                "priority": 1,
                "is_visited": False,
            }
        }


class TripInformationUpdateRequest(BaseModel):
    """
    Sparse patch for one trip information record.

    A field the sender omits is left unchanged. A field sent with a value is
    set to that value, and a nullable field sent as explicit ``null`` is
    cleared. Omitted and ``null`` are told apart through ``model_fields_set``.
    ``cost`` defaults to 0 but only counts as a change when it was sent.
    visitTime is kept as naive UTC, the form MongoDB returns on read.
    """

    trip_information_id: int | None = Field(None, alias="tripInformationId")
    place_id: int | None = Field(None, alias="placeId")
    visit_time: datetime | None = Field(None, alias="visitTime")
    duration: int | None = Field(None, description="Minutes")
    transportation: Transportation | None = None
    cost: int | None = 0
    notes: str | None = None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "tripInformationId": 7,
                "cost": 15000,
                "transportation": "CAR",
            }
        }

    @field_validator("visit_time")
    @classmethod
    def visit_time_as_naive_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def changes(self) -> dict[str, Any]:
        """Return the supplied fields keyed by their stored name."""
        return {
            name: getattr(self, name) for name in UPDATABLE_FIELDS if name in self.model_fields_set
        }

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON body shape, keeping only supplied fields."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")
