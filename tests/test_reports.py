"""
Report projection and export tests.

Reports must show exactly the rows the listings show, in the same order,
and the exported files must carry those rows.
"""
from datetime import datetime
from io import BytesIO

import openpyxl
import pytest

from crud.inventory import get_components
from crud.ledger import get_movements, record_movement
from crud.reports import (
    NO_CATEGORY,
    NO_LOCATION,
    component_report,
    generate_excel_report,
    generate_pdf_report,
    movement_report,
)
from exceptions import ForbiddenError
from models.ledger import Movement, MovementKind
from schemas.inventory import ComponentFilter
from schemas.ledger import MovementFilter


@pytest.fixture
def movements(db, admin, regular_user, components):
    record_movement(db, admin, components["Arduino Uno"], "loan", 2, person="Ana", notes="robotics club")
    record_movement(db, admin, components["Ultrasonic sensor"], "exit", 1)
    db.add(Movement(
        component_id=components["USB cable"],
        kind=MovementKind.ENTRY,
        quantity=10,
        created_at=datetime(2023, 1, 15, 8, 0),
    ))
    db.commit()


class TestComponentReport:
    def test_rows_match_listing(self, db, admin, components):
        filters = ComponentFilter(name="o", order_by="name")
        report = component_report(db, admin, filters)

        assert [row[0] for row in report.rows] == [c.id for c in get_components(db, admin, filters)]
        assert report.headers == ["ID", "Name", "Category", "Location", "Status", "Quantity"]

    def test_placeholders_for_missing_references(self, db, admin, components):
        rows = {row[1]: row for row in component_report(db, admin).rows}
        assert rows["USB cable"][2] == NO_CATEGORY
        assert rows["USB cable"][3] == NO_LOCATION
        assert rows["arduino shield kit"][2] == "Sensors"
        assert rows["arduino shield kit"][3] == NO_LOCATION

    def test_requires_admin(self, db, user, components):
        with pytest.raises(ForbiddenError):
            component_report(db, user)


class TestMovementReport:
    def test_rows_match_listing(self, db, admin, movements):
        filters = MovementFilter()
        report = movement_report(db, admin, filters)

        assert [row[0] for row in report.rows] == [m.id for m in get_movements(db, admin, filters)]
        assert report.row_count == 3
        assert report.headers == ["ID", "Component", "Movement", "Quantity", "Person", "Notes", "Date"]

    def test_filtered(self, db, admin, movements):
        report = movement_report(db, admin, MovementFilter(person="ana"))
        assert len(report.rows) == 1
        row = report.rows[0]
        assert row[1:6] == ["Arduino Uno", "loan", 2, "Ana", "robotics club"]

    def test_requires_admin(self, db, user, movements):
        with pytest.raises(ForbiddenError):
            movement_report(db, user)


class TestExcelExport:
    def test_components_workbook(self, db, admin, components):
        report = component_report(db, admin)
        content = generate_excel_report("components", report)

        ws = openpyxl.load_workbook(BytesIO(content)).active
        values = list(ws.values)
        assert list(values[0]) == report.headers
        assert ws["A1"].font.bold
        assert len(values) == len(report.rows) + 1
        assert [list(row) for row in values[1:]] == report.rows

    def test_movements_workbook_keeps_dates(self, db, admin, movements):
        report = movement_report(db, admin)
        content = generate_excel_report("movements", report)

        ws = openpyxl.load_workbook(BytesIO(content)).active
        values = list(ws.values)
        assert len(values) == 4
        for row, expected in zip(values[1:], report.rows):
            assert list(row[:4]) == expected[:4]
            assert isinstance(row[6], datetime)

    def test_empty_report(self, db, admin):
        report = movement_report(db, admin)
        ws = openpyxl.load_workbook(BytesIO(generate_excel_report("movements", report))).active
        assert ws.max_row == 1


class TestPdfExport:
    def test_components_pdf(self, db, admin, components):
        content = generate_pdf_report("components", component_report(db, admin))
        assert content.startswith(b"%PDF")

    def test_movements_pdf(self, db, admin, movements):
        content = generate_pdf_report("movements", movement_report(db, admin))
        assert content.startswith(b"%PDF")
        assert len(content) > 1000

    def test_long_notes_and_markup(self, db, admin, arduino):
        record_movement(db, admin, arduino, "entry", 1, notes="<b>bold & " + "long " * 200)
        content = generate_pdf_report("movements", movement_report(db, admin))
        assert content.startswith(b"%PDF")
