"""User database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from voltshare.core.database import Base

if TYPE_CHECKING:
    from voltshare.models.bill import Bill
    from voltshare.models.rental import RentalProperty


class User(Base):
    """Landlord account."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(100))
    hashed_password: Mapped[str] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    is_active: Mapped[bool] = mapped_column(default=True)

    # Relationships
    bills: Mapped[list["Bill"]] = relationship(
        back_populates="owner",
        cascade="all, delete-orphan",
    )
    rentals: Mapped[list["RentalProperty"]] = relationship(
        back_populates="owner",
        cascade="all, delete-orphan",
    )
