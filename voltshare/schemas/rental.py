"""Rental property Pydantic schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, field_validator


def _require_name(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Name must not be empty")
    return v.strip()


class RentalRoomUpdate(BaseModel):
    """Schema for renaming a room template."""

    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Room names cannot be blank."""
        return _require_name(v)


class RentalRoomCreate(BaseModel):
    """Schema for adding a room; omitted names are generated."""

    name: str | None = None


class RentalRoomResponse(BaseModel):
    """Schema for room template response."""

    id: str
    name: str

    model_config = {"from_attributes": True}


class RentalCreate(BaseModel):
    """Schema for creating a rental property."""

    name: str
    rooms: list[str] | None = None  # Room names; defaults to a single room

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Property names cannot be blank."""
        return _require_name(v)


class RentalUpdate(BaseModel):
    """Schema for renaming a rental property."""

    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Property names cannot be blank."""
        return _require_name(v)


class RentalResponse(BaseModel):
    """Schema for rental property response."""

    id: str
    name: str
    owner_id: int
    created_at: datetime
    rooms: list[RentalRoomResponse]

    model_config = {"from_attributes": True}
