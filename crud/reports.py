from datetime import datetime
from io import BytesIO
from typing import Optional

import openpyxl
from openpyxl.styles import Font, Alignment
from openpyxl.utils import get_column_letter
from reportlab.lib.pagesizes import A4, landscape
from sqlalchemy.orm import Session

from crud.inventory import get_components
from crud.ledger import get_movements
from models.user import Role
from schemas.inventory import ComponentFilter
from schemas.ledger import MovementFilter
from schemas.reports import TabularReport
from schemas.user import SessionIdentity
from security import authorize
from utils.pdf_generator import PDFGenerator

NO_CATEGORY = "No category"
NO_LOCATION = "No location"

# (header, excel width, pdf width in points)
REPORT_COLUMNS = {
    "components": [
        ("ID", 8, 30),
        ("Name", 30, 150),
        ("Category", 25, 100),
        ("Location", 25, 110),
        ("Status", 15, 80),
        ("Quantity", 10, 50),
    ],
    "movements": [
        ("ID", 8, 30),
        ("Component", 25, 140),
        ("Movement", 12, 60),
        ("Quantity", 10, 50),
        ("Person", 20, 110),
        ("Notes", 30, 250),
        ("Date", 20, 100),
    ],
}

REPORT_TITLES = {
    "components": "Components Report",
    "movements": "Loans and Returns History",
}

PAGE_SIZES = {
    "components": A4,
    "movements": landscape(A4),
}

def _headers(report_type: str):
    return [header for header, _, _ in REPORT_COLUMNS[report_type]]

def component_report(db: Session, actor: SessionIdentity, filters: Optional[ComponentFilter] = None) -> TabularReport:
    """
    Project the component listing into report rows. Uses the same query as the
    listing so both show the same rows in the same order.
    """
    authorize(actor, Role.ADMIN)
    rows = [
        [
            component.id,
            component.name or "",
            component.category_name or NO_CATEGORY,
            component.location_name or NO_LOCATION,
            component.status or "",
            component.quantity if component.quantity is not None else 0,
        ]
        for component in get_components(db, actor, filters)
    ]
    return TabularReport(title=REPORT_TITLES["components"], headers=_headers("components"), rows=rows)

def movement_report(db: Session, actor: SessionIdentity, filters: Optional[MovementFilter] = None) -> TabularReport:
    authorize(actor, Role.ADMIN)
    rows = [
        [
            movement.id,
            movement.component_name,
            movement.kind.value,
            movement.quantity,
            movement.person or "",
            movement.notes or "",
            movement.created_at,
        ]
        for movement in get_movements(db, actor, filters)
    ]
    return TabularReport(title=REPORT_TITLES["movements"], headers=_headers("movements"), rows=rows)

def generate_excel_report(report_type: str, report: TabularReport) -> bytes:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = report_type.capitalize()

    header_font = Font(bold=True)
    ws.append(report.headers)
    for cell in ws[1]:
        cell.font = header_font
        cell.alignment = Alignment(horizontal='left')

    for row in report.rows:
        values = []
        for value in row:
            if isinstance(value, datetime) and value.tzinfo is not None:
                value = value.replace(tzinfo=None)
            values.append(value)
        ws.append(values)

    for index, (_, width, _) in enumerate(REPORT_COLUMNS[report_type], start=1):
        column = get_column_letter(index)
        ws.column_dimensions[column].width = width
        if report.headers[index - 1] == "Date":
            for cell in ws[column][1:]:
                cell.number_format = 'yyyy-mm-dd hh:mm'

    buffer = BytesIO()
    wb.save(buffer)
    excel_data = buffer.getvalue()
    buffer.close()
    return excel_data

def generate_pdf_report(report_type: str, report: TabularReport) -> bytes:
    generator = PDFGenerator(pagesize=PAGE_SIZES[report_type])
    col_widths = [pdf_width for _, _, pdf_width in REPORT_COLUMNS[report_type]]
    return generator.create_table_pdf(report.title, report.headers, report.rows, col_widths)
