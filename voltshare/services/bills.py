"""Bill service: persistence of calculated bill records."""

import logging
from datetime import UTC, datetime

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from voltshare.models.bill import Bill, BillRoom
from voltshare.schemas.allocation import BillingPeriod, BillRecord, CalculatedRoom
from voltshare.schemas.bill import BillSummary

logger = logging.getLogger(__name__)


def bill_to_record(bill: Bill) -> BillRecord:
    """Convert a stored Bill back into an immutable BillRecord."""
    return BillRecord(
        id=bill.id,
        period=BillingPeriod(label=bill.period_label, year=bill.period_year),
        rate_per_unit=bill.rate_per_unit,
        main_meter_reading=bill.main_meter_reading,
        total_submeter_reading=bill.total_submeter_reading,
        missing_consumption=bill.missing_consumption,
        rooms=[
            CalculatedRoom(
                id=room.room_id,
                name=room.name,
                original_consumption=room.original_consumption,
                share=room.share,
                compensation_consumption=room.compensation_consumption,
                final_consumption=room.final_consumption,
                bill_amount=room.bill_amount,
            )
            for room in bill.rooms
        ],
        created_at=bill.created_at,
        property_id=bill.property_id,
        property_name=bill.property_name,
    )


def bill_to_summary(bill: Bill) -> BillSummary:
    """Convert a stored Bill into a listing summary."""
    return BillSummary(
        id=bill.id,
        period_label=bill.period_label,
        period_year=bill.period_year,
        property_name=bill.property_name,
        total_amount=sum((room.bill_amount for room in bill.rooms), 0.0),
        created_at=bill.created_at,
    )


def save_bill(db: Session, record: BillRecord, owner_id: int) -> Bill:
    """Persist a bill record for its owner. The save time becomes created_at."""
    if db.query(Bill).filter(Bill.id == record.id).first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Bill '{record.id}' has already been saved",
        )

    bill = Bill(
        id=record.id,
        owner_id=owner_id,
        period_label=record.period.label,
        period_year=record.period.year,
        rate_per_unit=record.rate_per_unit,
        main_meter_reading=record.main_meter_reading,
        total_submeter_reading=record.total_submeter_reading,
        missing_consumption=record.missing_consumption,
        property_id=record.property_id,
        property_name=record.property_name,
        created_at=datetime.now(UTC),
    )
    bill.rooms = [
        BillRoom(
            position=position,
            room_id=room.id,
            name=room.name,
            original_consumption=room.original_consumption,
            share=room.share,
            compensation_consumption=room.compensation_consumption,
            final_consumption=room.final_consumption,
            bill_amount=room.bill_amount,
        )
        for position, room in enumerate(record.rooms)
    ]
    db.add(bill)
    db.commit()
    db.refresh(bill)
    logger.info("Saved bill %s for user %s (%d rooms)", bill.id, owner_id, len(bill.rooms))
    return bill


def get_bills(db: Session, owner_id: int, limit: int | None = None) -> list[Bill]:
    """Get an owner's saved bills, newest first."""
    query = db.query(Bill).filter(Bill.owner_id == owner_id).order_by(Bill.created_at.desc())
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def count_bills(db: Session, owner_id: int) -> int:
    """Count an owner's saved bills."""
    return db.query(Bill).filter(Bill.owner_id == owner_id).count()


def get_bill(db: Session, bill_id: str, owner_id: int) -> Bill:
    """Get one of the owner's bills by ID."""
    bill = db.query(Bill).filter(Bill.id == bill_id, Bill.owner_id == owner_id).first()
    if not bill:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Bill not found",
        )
    return bill


def delete_bill(db: Session, bill_id: str, owner_id: int) -> None:
    """Delete one of the owner's bills."""
    bill = get_bill(db, bill_id, owner_id)
    db.delete(bill)
    db.commit()
    logger.info("Deleted bill %s for user %s", bill_id, owner_id)
