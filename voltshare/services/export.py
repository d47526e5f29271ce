"""Bill statement export to PDF and spreadsheet.

Both renderers take a finished BillRecord and return the document bytes.
This is the only place values are rounded for display.
"""

import io
import logging
from xml.sax.saxutils import escape

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from voltshare.core.config import settings
from voltshare.schemas.allocation import BillRecord

logger = logging.getLogger(__name__)

MANUAL_ENTRY = "Manual Entry"
HEADER_BLUE = "3B82F6"

PDF_HEADERS = ["Room", "Actual", "Share %", "Loss Shared", "Total", "Amount"]
SHEET_HEADERS = [
    "Room",
    "Actual Consumption",
    "Consumption Share (%)",
    "Loss Shared",
    "Final Billed Consumption",
    "Rate",
    "Total Bill",
]


def _money(value: float) -> str:
    return f"{settings.CURRENCY_SYMBOL}{value:,.2f}"


def _qty(value: float) -> str:
    return f"{value:.2f}"


def _percent(share: float) -> str:
    return f"{share * 100:.2f}%"


def property_label(record: BillRecord) -> str:
    """Property name shown on statements."""
    return record.property_name or MANUAL_ENTRY


def export_filename(record: BillRecord, extension: str) -> str:
    """Download filename, e.g. VoltShare_Statement_January_2024.pdf."""
    label = record.period.label.replace(" ", "_") or "Statement"
    return f"{settings.PROJECT_NAME}_Statement_{label}_{record.period.year}.{extension}"


def ascii_filename(filename: str) -> str:
    """Printable-ASCII version of a filename for plain ``filename=`` headers.

    Non-ASCII characters, quotes and backslashes become underscores.
    """
    return "".join(
        ch if " " <= ch <= "~" and ch not in '"\\' else "_" for ch in filename
    )


def render_pdf(record: BillRecord) -> bytes:
    """Render a one-page billing statement as PDF."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=14 * mm,
        rightMargin=14 * mm,
        topMargin=14 * mm,
        bottomMargin=14 * mm,
        title=f"{settings.PROJECT_NAME} Billing Statement - "
        f"{record.period.label} {record.period.year}",
    )
    ss = getSampleStyleSheet()
    meta = ParagraphStyle("META", parent=ss["Normal"], fontSize=10, textColor=colors.grey)
    unit = settings.UNIT_LABEL

    flow = [
        Paragraph(f"{settings.PROJECT_NAME} Statement", ss["Title"]),
        Paragraph(f"Property: {escape(property_label(record))}", meta),
        Paragraph(f"Billing Period: {escape(record.period.label)} {record.period.year}", meta),
        Paragraph(f"Main Meter Reading: {_qty(record.main_meter_reading)} {unit}", meta),
        Paragraph(f"Rate: {_money(record.rate_per_unit)}/{unit}", meta),
        Paragraph(f"Total Discrepancy Shared: {_qty(record.missing_consumption)} {unit}", meta),
        Spacer(1, 6 * mm),
    ]

    rows = [PDF_HEADERS] + [
        [
            room.name,
            _qty(room.original_consumption),
            _percent(room.share),
            _qty(room.compensation_consumption),
            _qty(room.final_consumption),
            _money(room.bill_amount),
        ]
        for room in record.rooms
    ]
    table = Table(rows, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(f"#{HEADER_BLUE}")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
            ]
        )
    )
    flow.append(table)
    flow.append(Spacer(1, 6 * mm))
    flow.append(Paragraph(f"Total Property Bill: {_money(record.total_amount)}", ss["Heading3"]))

    doc.build(flow)
    logger.info("Rendered PDF statement for bill %s", record.id)
    return buffer.getvalue()


def render_xlsx(record: BillRecord) -> bytes:
    """Render the statement as a single-sheet workbook.

    Numbers are written unrounded so the sheet can be recalculated; only the
    share column is rounded, to two decimals of a percent.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Billing Statement"

    ws.append(SHEET_HEADERS)
    for cell in ws[1]:
        cell.font = Font(bold=True, color="FFFFFF")
        cell.fill = PatternFill("solid", fgColor=HEADER_BLUE)

    for room in record.rooms:
        ws.append(
            [
                room.name,
                room.original_consumption,
                round(room.share * 100, 2),
                room.compensation_consumption,
                room.final_consumption,
                record.rate_per_unit,
                room.bill_amount,
            ]
        )

    ws.append([])
    for label, value in (
        ("Property", property_label(record)),
        ("Billing Period", f"{record.period.label} {record.period.year}"),
        ("Main Meter Total", record.main_meter_reading),
        ("Total Submeter Sum", record.total_submeter_reading),
        ("Missing Distributed", record.missing_consumption),
        ("Grand Total Bill", record.total_amount),
    ):
        ws.append([label, value])

    buffer = io.BytesIO()
    wb.save(buffer)
    logger.info("Rendered spreadsheet statement for bill %s", record.id)
    return buffer.getvalue()
