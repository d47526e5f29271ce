"""Bill request and summary schemas."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

from voltshare.schemas.allocation import RoomReading


def _current_month() -> str:
    return datetime.now(UTC).strftime("%B")


def _current_year() -> int:
    return datetime.now(UTC).year


class CalculationRequest(BaseModel):
    """Raw readings for one calculation.

    Numeric fields accept numbers or text; unparseable values count as zero.
    A missing rate falls back to the configured default.
    """

    main_meter_reading: Any = 0
    rate_per_unit: Any = None
    rooms: list[RoomReading] = Field(default_factory=list)
    period_label: str = Field(default_factory=_current_month)
    period_year: int = Field(default_factory=_current_year)
    property_id: str | None = None


class BillSummary(BaseModel):
    """Compact view of a saved bill for listings."""

    id: str
    period_label: str
    period_year: int
    property_name: str | None
    total_amount: float
    created_at: datetime


class DashboardSummary(BaseModel):
    """Portfolio overview for the signed-in landlord."""

    rental_count: int
    bill_count: int
    room_count: int
    recent_bills: list[BillSummary]
