"""Tests for PDF and spreadsheet statement rendering."""

import io
from datetime import UTC, datetime

import pytest
from openpyxl import load_workbook

from voltshare.services.allocation import calculate_bill
from voltshare.services.export import (
    ascii_filename,
    export_filename,
    property_label,
    render_pdf,
    render_xlsx,
)


@pytest.fixture
def record():
    """The reference bill: 200 kWh main meter, 12 per kWh, rooms of 90 and 100."""
    return calculate_bill(
        200,
        12,
        [
            {"id": "1", "name": "Room 1", "consumption": 90},
            {"id": "2", "name": "Room 2", "consumption": 100},
        ],
        "January",
        2024,
        property_name="Dorm A & Annex",
        clock=lambda: datetime(2024, 2, 1, tzinfo=UTC),
        id_factory=lambda: "bill-1",
    )


class TestExportHelpers:
    """Tests for filenames and labels."""

    def test_filename(self, record) -> None:
        assert export_filename(record, "pdf") == "VoltShare_Statement_January_2024.pdf"

    def test_filename_spaces(self, record) -> None:
        period = record.period.model_copy(update={"label": "Q1 Late"})
        renamed = record.model_copy(update={"period": period})
        assert export_filename(renamed, "xlsx") == "VoltShare_Statement_Q1_Late_2024.xlsx"

    def test_ascii_filename(self) -> None:
        assert ascii_filename("VoltShare_Statement_January_2024.pdf") == (
            "VoltShare_Statement_January_2024.pdf"
        )
        assert ascii_filename("Statement_\"Q1\"_\\_Año.pdf") == "Statement__Q1____A_o.pdf"

    def test_manual_entry_label(self, record) -> None:
        assert property_label(record) == "Dorm A & Annex"
        assert property_label(record.model_copy(update={"property_name": None})) == "Manual Entry"


class TestRenderPdf:
    """Tests for the PDF statement."""

    def test_is_pdf(self, record) -> None:
        content = render_pdf(record)
        assert content.startswith(b"%PDF")
        assert content.rstrip().endswith(b"%%EOF")

    def test_no_rooms(self, record) -> None:
        empty = record.model_copy(update={"rooms": ()})
        assert render_pdf(empty).startswith(b"%PDF")


class TestRenderXlsx:
    """Tests for the spreadsheet statement."""

    def test_room_rows(self, record) -> None:
        ws = load_workbook(io.BytesIO(render_xlsx(record))).active
        assert ws.title == "Billing Statement"
        assert ws["A1"].value == "Room"
        assert ws["G1"].value == "Total Bill"
        assert ws["A2"].value == "Room 1"
        assert ws["B2"].value == 90
        assert ws["C2"].value == pytest.approx(47.37)
        assert ws["F2"].value == 12
        assert ws["G2"].value == pytest.approx(1136.842, abs=1e-3)
        assert ws["G3"].value == pytest.approx(1263.158, abs=1e-3)

    def test_summary_block(self, record) -> None:
        ws = load_workbook(io.BytesIO(render_xlsx(record))).active
        summary = {
            row[0]: row[1]
            for row in ws.iter_rows(min_row=4, max_col=2, values_only=True)
            if row[0] is not None
        }
        assert summary["Property"] == "Dorm A & Annex"
        assert summary["Billing Period"] == "January 2024"
        assert summary["Main Meter Total"] == 200
        assert summary["Total Submeter Sum"] == 190
        assert summary["Missing Distributed"] == 10
        assert summary["Grand Total Bill"] == pytest.approx(2400.0)
