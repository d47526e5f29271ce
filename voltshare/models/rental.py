"""Rental property template database models."""

import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from voltshare.core.database import Base

if TYPE_CHECKING:
    from voltshare.models.user import User


def _uuid_str() -> str:
    return str(uuid.uuid4())


class RentalProperty(Base):
    """A rental property whose room list pre-populates new calculations."""

    __tablename__ = "rental_properties"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid_str)
    owner_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(100))
    created_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        index=True,
    )

    # Relationships
    owner: Mapped["User"] = relationship(back_populates="rentals")
    rooms: Mapped[list["RentalRoom"]] = relationship(
        back_populates="rental",
        cascade="all, delete-orphan",
        order_by="RentalRoom.position",
    )


class RentalRoom(Base):
    """Room template: just an id and a display name."""

    __tablename__ = "rental_rooms"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid_str)
    rental_id: Mapped[str] = mapped_column(
        ForeignKey("rental_properties.id", ondelete="CASCADE"),
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100))
    position: Mapped[int] = mapped_column(default=0)

    rental: Mapped["RentalProperty"] = relationship(back_populates="rooms")
