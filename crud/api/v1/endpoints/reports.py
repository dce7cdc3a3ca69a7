from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
from typing import Literal, Optional
from datetime import date

from crud import reports
from crud.api.deps import get_current_identity
from database import get_db
from schemas.inventory import ComponentFilter
from schemas.ledger import MovementFilter
from schemas.reports import TabularReport
from schemas.user import SessionIdentity

router = APIRouter()

MEDIA_TYPES = {
    "pdf": "application/pdf",
    "excel": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}

def _export(report_type: str, report: TabularReport, format: str) -> Response:
    if format == "pdf":
        content = reports.generate_pdf_report(report_type, report)
        filename = f"{report_type}.pdf"
    else:
        content = reports.generate_excel_report(report_type, report)
        filename = f"{report_type}.xlsx"
    return Response(
        content=content,
        media_type=MEDIA_TYPES[format],
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )

@router.get("/components", response_model=TabularReport)
def get_component_report(
    name: Optional[str] = None,
    category_id: Optional[int] = None,
    location_id: Optional[int] = None,
    order_by: Literal["id", "name"] = "id",
    identity: SessionIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """
    Component rows exactly as the export would contain them
    """
    filters = ComponentFilter(name=name, category_id=category_id, location_id=location_id, order_by=order_by)
    return reports.component_report(db, identity, filters)

@router.get("/components/export")
def export_component_report(
    format: Literal["pdf", "excel"] = Query("pdf"),
    name: Optional[str] = None,
    category_id: Optional[int] = None,
    location_id: Optional[int] = None,
    order_by: Literal["id", "name"] = "id",
    identity: SessionIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    filters = ComponentFilter(name=name, category_id=category_id, location_id=location_id, order_by=order_by)
    report = reports.component_report(db, identity, filters)
    return _export("components", report, format)

@router.get("/movements", response_model=TabularReport)
def get_movement_report(
    person: Optional[str] = None,
    date_from: Optional[date] = Query(None, description="First day included"),
    date_to: Optional[date] = Query(None, description="Last day included"),
    component_id: Optional[int] = None,
    identity: SessionIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    filters = MovementFilter(person=person, date_from=date_from, date_to=date_to, component_id=component_id)
    return reports.movement_report(db, identity, filters)

@router.get("/movements/export")
def export_movement_report(
    format: Literal["pdf", "excel"] = Query("pdf"),
    person: Optional[str] = None,
    date_from: Optional[date] = Query(None, description="First day included"),
    date_to: Optional[date] = Query(None, description="Last day included"),
    component_id: Optional[int] = None,
    identity: SessionIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    filters = MovementFilter(person=person, date_from=date_from, date_to=date_to, component_id=component_id)
    report = reports.movement_report(db, identity, filters)
    return _export("movements", report, format)
