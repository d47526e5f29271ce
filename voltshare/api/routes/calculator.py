"""Stateless bill calculation route."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from voltshare.api.dependencies import get_current_user_optional
from voltshare.core.database import get_db
from voltshare.models.user import User
from voltshare.schemas.allocation import BillRecord
from voltshare.schemas.bill import CalculationRequest
from voltshare.services.calculation import calculate_from_request

router = APIRouter(tags=["calculator"])


@router.post("/calculate", response_model=BillRecord)
def calculate(
    data: CalculationRequest,
    db: Session = Depends(get_db),
    user: User | None = Depends(get_current_user_optional),
) -> BillRecord:
    """Preview a bill without saving it.

    Each room is billed for its own reading plus a share of the main meter
    discrepancy proportional to its reading:

        bill = (consumption + consumption / total * missing) * rate

    Anonymous callers may use this; selecting a saved rental needs a token.
    """
    return calculate_from_request(db, data, user.id if user else None)
