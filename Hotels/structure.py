'''
Structure class implementation for Hotels module.
'''
from datetime import datetime, timezone
from pydantic import Field, model_validator
from utils import CamelModel, validate_timestamps


class Room(CamelModel):

    id : int = Field(frozen=True)
    hotel_id : int = Field(frozen=True)
    name : str
    capacity : int
    created_at : datetime = Field(default_factory=lambda: datetime.now(timezone.utc), frozen=True)
    updated_at : datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def validate_structure(self):
        # enforce positive capacity
        if self.capacity <= 0:
            raise ValueError("Room capacity must be a positive integer.")
        validate_timestamps(self.created_at, self.updated_at)
        return self


class Hotel(CamelModel):

    id : int = Field(frozen=True)
    name : str
    image : str
    created_at : datetime = Field(default_factory=lambda: datetime.now(timezone.utc), frozen=True)
    updated_at : datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def validate_structure(self):
        # enforce chronological consistency
        validate_timestamps(self.created_at, self.updated_at)
        return self


class HotelWithRooms(Hotel):
    """Hotel together with every room it owns."""

    rooms : list[Room] = Field(default_factory=list, alias="Rooms")
