"""Saved bill routes: calculate-and-save, history, deletion and export."""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from voltshare.api.dependencies import get_current_user
from voltshare.core.database import get_db
from voltshare.models.user import User
from voltshare.schemas.allocation import BillRecord
from voltshare.schemas.bill import CalculationRequest
from voltshare.services import bills as bill_service
from voltshare.services import export as export_service
from voltshare.services.calculation import calculate_from_request

router = APIRouter(prefix="/bills", tags=["bills"])

PDF_MEDIA_TYPE = "application/pdf"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _attachment(content: bytes, media_type: str, filename: str) -> Response:
    # Header values must be latin-1; the UTF-8 name travels in filename*
    fallback = export_service.ascii_filename(filename)
    disposition = f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": disposition},
    )


@router.post("", response_model=BillRecord, status_code=status.HTTP_201_CREATED)
def create_bill(
    data: CalculationRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> BillRecord:
    """Calculate a bill and save it to the user's history."""
    record = calculate_from_request(db, data, user.id)
    bill = bill_service.save_bill(db, record, user.id)
    return bill_service.bill_to_record(bill)


@router.get("", response_model=list[BillRecord])
def list_bills(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> list[BillRecord]:
    """List the user's saved bills, newest first."""
    return [bill_service.bill_to_record(b) for b in bill_service.get_bills(db, user.id)]


@router.get("/{bill_id}", response_model=BillRecord)
def get_bill(
    bill_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> BillRecord:
    """Get a saved bill by ID."""
    return bill_service.bill_to_record(bill_service.get_bill(db, bill_id, user.id))


@router.delete("/{bill_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bill(
    bill_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> None:
    """Delete a saved bill."""
    bill_service.delete_bill(db, bill_id, user.id)


@router.get("/{bill_id}/export/pdf", response_class=Response)
def export_pdf(
    bill_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> Response:
    """Download the bill as a PDF statement."""
    record = bill_service.bill_to_record(bill_service.get_bill(db, bill_id, user.id))
    return _attachment(
        export_service.render_pdf(record),
        PDF_MEDIA_TYPE,
        export_service.export_filename(record, "pdf"),
    )


@router.get("/{bill_id}/export/xlsx", response_class=Response)
def export_xlsx(
    bill_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> Response:
    """Download the bill as a spreadsheet."""
    record = bill_service.bill_to_record(bill_service.get_bill(db, bill_id, user.id))
    return _attachment(
        export_service.render_xlsx(record),
        XLSX_MEDIA_TYPE,
        export_service.export_filename(record, "xlsx"),
    )
