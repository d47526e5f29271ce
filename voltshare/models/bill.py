"""Saved bill database models."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from voltshare.core.database import Base

if TYPE_CHECKING:
    from voltshare.models.user import User


class Bill(Base):
    """A calculated bill persisted for its owner.

    The primary key is the id the allocation engine generated, so a record
    can only be saved once.
    """

    __tablename__ = "bills"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    owner_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    period_label: Mapped[str] = mapped_column(String(50))
    period_year: Mapped[int]
    rate_per_unit: Mapped[float]
    main_meter_reading: Mapped[float]
    total_submeter_reading: Mapped[float]
    missing_consumption: Mapped[float]
    property_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    property_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        index=True,
    )

    # Relationships
    owner: Mapped["User"] = relationship(back_populates="bills")
    rooms: Mapped[list["BillRoom"]] = relationship(
        back_populates="bill",
        cascade="all, delete-orphan",
        order_by="BillRoom.position",
    )


class BillRoom(Base):
    """One itemized room line of a saved bill."""

    __tablename__ = "bill_rooms"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    bill_id: Mapped[str] = mapped_column(ForeignKey("bills.id", ondelete="CASCADE"), index=True)
    position: Mapped[int]  # Input order of the room
    room_id: Mapped[str] = mapped_column(String(64))
    name: Mapped[str] = mapped_column(String(100))
    original_consumption: Mapped[float]
    share: Mapped[float]
    compensation_consumption: Mapped[float]
    final_consumption: Mapped[float]
    bill_amount: Mapped[float]

    bill: Mapped["Bill"] = relationship(back_populates="rooms")
