"""Allocation engine: share the main meter discrepancy across rooms.

The unmetered part of a property's consumption (main meter minus the sum of
room submeters) is distributed to rooms in proportion to their own metered
consumption, and every room is billed for its reading plus its share of the
loss at a single rate:

    share        = consumption / total_submetered
    compensation = share * max(0, main_meter - total_submetered)
    bill         = (consumption + compensation) * rate

Everything here is pure: no I/O, no shared state, safe to call concurrently.
"""

import uuid
from collections.abc import Callable, Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from voltshare.schemas.allocation import (
    Allocation,
    BillingPeriod,
    BillRecord,
    CalculatedRoom,
    RoomReading,
    parse_number,
)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_bill_id() -> str:
    return str(uuid.uuid4())


def normalize_room(room: RoomReading | Mapping[str, Any] | Any) -> RoomReading:
    """Turn a caller-supplied room into a RoomReading with a numeric consumption."""
    if isinstance(room, RoomReading):
        return room
    if isinstance(room, Mapping):
        return RoomReading.model_validate(dict(room))
    return RoomReading(
        id=getattr(room, "id", ""),
        name=getattr(room, "name", ""),
        consumption=getattr(room, "consumption", getattr(room, "kwh", 0)),
    )


def compute_missing_consumption(main_meter_reading: float, total_submeter_reading: float) -> float:
    """
    Compute the consumption nobody's submeter recorded.

    Formula: missing = main_meter - sum(submeters)

    Returns 0 if submeters exceed the main meter; the surplus is not
    subtracted back from the rooms.
    """
    return max(0.0, main_meter_reading - total_submeter_reading)


def allocate(
    main_meter_reading: Any,
    rate_per_unit: Any,
    rooms: Iterable[RoomReading | Mapping[str, Any] | Any],
) -> Allocation:
    """Compute totals and the per-room breakdown. Fully deterministic."""
    main = parse_number(main_meter_reading)
    rate = parse_number(rate_per_unit)
    readings = [normalize_room(room) for room in rooms]

    total = sum((r.consumption for r in readings), 0.0)
    missing = compute_missing_consumption(main, total)

    calculated: list[CalculatedRoom] = []
    for reading in readings:
        share = reading.consumption / total if total > 0 else 0.0
        compensation = share * missing
        final = reading.consumption + compensation
        calculated.append(
            CalculatedRoom(
                id=reading.id,
                name=reading.name,
                original_consumption=reading.consumption,
                share=share,
                compensation_consumption=compensation,
                final_consumption=final,
                bill_amount=final * rate,
            )
        )

    return Allocation(
        main_meter_reading=main,
        rate_per_unit=rate,
        total_submeter_reading=total,
        missing_consumption=missing,
        rooms=tuple(calculated),
    )


def calculate_bill(
    main_meter_reading: Any,
    rate_per_unit: Any,
    rooms: Iterable[RoomReading | Mapping[str, Any] | Any],
    period_label: str,
    period_year: int,
    *,
    property_id: str | None = None,
    property_name: str | None = None,
    clock: Callable[[], datetime] = _utcnow,
    id_factory: Callable[[], str] = _new_bill_id,
) -> BillRecord:
    """Build a complete bill record from raw meter readings.

    Numeric inputs may be numbers or text; anything unparseable counts as
    zero. The id and timestamp come from ``id_factory`` and ``clock`` so tests
    can pin them.
    """
    allocation = allocate(main_meter_reading, rate_per_unit, rooms)
    return BillRecord(
        id=id_factory(),
        period=BillingPeriod(label=period_label, year=period_year),
        rate_per_unit=allocation.rate_per_unit,
        main_meter_reading=allocation.main_meter_reading,
        total_submeter_reading=allocation.total_submeter_reading,
        missing_consumption=allocation.missing_consumption,
        rooms=allocation.rooms,
        created_at=clock(),
        property_id=property_id,
        property_name=property_name,
    )
