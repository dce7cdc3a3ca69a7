from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date

from crud import ledger
from crud.api.deps import get_current_identity
from database import get_db
from schemas.ledger import LoanReturn, Movement, MovementCreate, MovementFilter
from schemas.user import SessionIdentity

router = APIRouter()

@router.get("/", response_model=List[Movement])
def list_movements(
    person: Optional[str] = Query(None, description="Case-insensitive person substring"),
    date_from: Optional[date] = Query(None, description="First day included"),
    date_to: Optional[date] = Query(None, description="Last day included"),
    component_id: Optional[int] = None,
    identity: SessionIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    filters = MovementFilter(person=person, date_from=date_from, date_to=date_to, component_id=component_id)
    return ledger.get_movements(db, identity, filters)

@router.get("/{movement_id}", response_model=Movement)
def get_movement(movement_id: int, identity: SessionIdentity = Depends(get_current_identity), db: Session = Depends(get_db)):
    return ledger.get_movement(db, identity, movement_id)

@router.post("/", response_model=Movement, status_code=status.HTTP_201_CREATED)
def record_movement(movement: MovementCreate, identity: SessionIdentity = Depends(get_current_identity), db: Session = Depends(get_db)):
    return ledger.record_movement(
        db,
        identity,
        movement.component_id,
        movement.kind,
        movement.quantity,
        movement.person,
        movement.notes,
    )

@router.post("/{movement_id}/return", response_model=Movement, status_code=status.HTTP_201_CREATED)
def return_loan(
    movement_id: int,
    loan_return: Optional[LoanReturn] = None,
    identity: SessionIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    notes = loan_return.notes if loan_return else None
    return ledger.return_loan(db, identity, movement_id, notes)
