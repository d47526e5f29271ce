"""Dashboard summary route."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from voltshare.api.dependencies import get_current_user
from voltshare.core.database import get_db
from voltshare.models.user import User
from voltshare.schemas.bill import DashboardSummary
from voltshare.services import bills as bill_service
from voltshare.services import rentals as rental_service

RECENT_BILLS = 5

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardSummary)
def dashboard(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> DashboardSummary:
    """Counts of rentals, bills and rooms plus the most recent bills."""
    rentals = rental_service.get_rentals(db, user.id)
    recent = bill_service.get_bills(db, user.id, limit=RECENT_BILLS)
    return DashboardSummary(
        rental_count=len(rentals),
        bill_count=bill_service.count_bills(db, user.id),
        room_count=rental_service.count_rooms(rentals),
        recent_bills=[bill_service.bill_to_summary(b) for b in recent],
    )
