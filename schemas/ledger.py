from pydantic import BaseModel
from datetime import date, datetime
from typing import Optional
from models.ledger import MovementKind

class MovementCreate(BaseModel):
    component_id: int
    kind: str
    quantity: int
    person: Optional[str] = None
    notes: Optional[str] = None

class LoanReturn(BaseModel):
    notes: Optional[str] = None

class Movement(BaseModel):
    id: int
    component_id: int
    component_name: Optional[str] = None
    kind: MovementKind
    quantity: int
    person: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class MovementFilter(BaseModel):
    person: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    component_id: Optional[int] = None
