"""Calculation service: runs the allocation engine for API requests."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from voltshare.core.config import settings
from voltshare.schemas.allocation import BillRecord
from voltshare.schemas.bill import CalculationRequest
from voltshare.services.allocation import calculate_bill
from voltshare.services.rentals import get_rental

logger = logging.getLogger(__name__)


def calculate_from_request(
    db: Session,
    data: CalculationRequest,
    owner_id: int | None = None,
) -> BillRecord:
    """Calculate a bill, stamping the rental's name when one is selected.

    Selecting a rental requires an owner; other users' rentals are not found.
    """
    property_id = None
    property_name = None
    if data.property_id:
        if owner_id is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Sign in to bill a saved rental property",
                headers={"WWW-Authenticate": "Bearer"},
            )
        rental = get_rental(db, data.property_id, owner_id)
        property_id, property_name = rental.id, rental.name

    rate = settings.DEFAULT_RATE_PER_UNIT if data.rate_per_unit is None else data.rate_per_unit
    record = calculate_bill(
        data.main_meter_reading,
        rate,
        data.rooms,
        data.period_label,
        data.period_year,
        property_id=property_id,
        property_name=property_name,
    )

    if record.submeter_surplus > 0:
        logger.warning(
            "Submeters exceed main meter by %.2f for bill %s (%s %s); surplus not billed",
            record.submeter_surplus,
            record.id,
            record.period.label,
            record.period.year,
        )
    return record
