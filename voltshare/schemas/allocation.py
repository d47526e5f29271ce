"""Allocation schemas: room readings in, itemized bill records out."""

import math
import re
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field, field_validator

# ASCII digits only: no digit-grouping underscores, no non-Latin numerals
_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(value: Any) -> float:
    """Coerce a number or numeric text to float.

    Text is read up to the end of its leading number, so "12abc" is 12.0 and
    "1_000" is 1.0. Anything without one (empty text, garbage, None, NaN,
    infinities) becomes 0.0 instead of raising.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        if isinstance(value, (int, float, Decimal)):
            number = float(value)
        elif isinstance(value, str):
            match = _LEADING_NUMBER.match(value)
            if match is None:
                return 0.0
            number = float(match.group(0))
        else:
            return 0.0
    except (ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


class RoomReading(BaseModel):
    """A single submeter reading supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str = ""
    consumption: float = Field(
        default=0.0,
        validation_alias=AliasChoices("consumption", "kwh"),
    )

    @field_validator("id", "name", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Accept any scalar as a label."""
        return "" if v is None else str(v)

    @field_validator("consumption", mode="before")
    @classmethod
    def coerce_consumption(cls, v: Any) -> float:
        """Malformed readings count as zero."""
        return parse_number(v)


class BillingPeriod(BaseModel):
    """Billing period, e.g. January 2024."""

    model_config = ConfigDict(frozen=True)

    label: str
    year: int


class CalculatedRoom(BaseModel):
    """Per-room result of the allocation."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    original_consumption: float
    share: float  # Fraction of total submetered consumption (0-1)
    compensation_consumption: float  # share * missing_consumption
    final_consumption: float  # original + compensation
    bill_amount: float  # final * rate


class Allocation(BaseModel):
    """Deterministic part of a bill: totals and per-room breakdown."""

    model_config = ConfigDict(frozen=True)

    main_meter_reading: float
    rate_per_unit: float
    total_submeter_reading: float
    missing_consumption: float
    rooms: tuple[CalculatedRoom, ...]


class BillRecord(BaseModel):
    """Fully itemized bill produced by one calculation."""

    model_config = ConfigDict(frozen=True)

    id: str
    period: BillingPeriod
    rate_per_unit: float
    main_meter_reading: float
    total_submeter_reading: float
    missing_consumption: float
    rooms: tuple[CalculatedRoom, ...]
    created_at: datetime
    property_id: str | None = None
    property_name: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_amount(self) -> float:
        """Grand total billed across all rooms."""
        return sum((room.bill_amount for room in self.rooms), 0.0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def submeter_surplus(self) -> float:
        """Amount by which submeters exceed the main meter (ignored for billing)."""
        return max(0.0, self.total_submeter_reading - self.main_meter_reading)
