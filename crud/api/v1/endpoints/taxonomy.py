from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from crud import taxonomy
from crud.api.deps import get_current_identity
from database import get_db
from models.inventory import Category, Location
from schemas.taxonomy import Term, TermCreate
from schemas.user import SessionIdentity

def build_router(model) -> APIRouter:
    router = APIRouter()

    @router.get("/", response_model=List[Term])
    def list_terms(identity: SessionIdentity = Depends(get_current_identity), db: Session = Depends(get_db)):
        return taxonomy.get_terms(db, identity, model)

    @router.post("/", response_model=Term, status_code=status.HTTP_201_CREATED)
    def create_term(term: TermCreate, identity: SessionIdentity = Depends(get_current_identity), db: Session = Depends(get_db)):
        return taxonomy.create_term(db, identity, model, term.name)

    @router.put("/{term_id}", response_model=Term)
    def rename_term(term_id: int, term: TermCreate, identity: SessionIdentity = Depends(get_current_identity), db: Session = Depends(get_db)):
        return taxonomy.rename_term(db, identity, model, term_id, term.name)

    @router.delete("/{term_id}")
    def delete_term(term_id: int, identity: SessionIdentity = Depends(get_current_identity), db: Session = Depends(get_db)):
        taxonomy.delete_term(db, identity, model, term_id)
        return {"status": "success"}

    return router

categories = build_router(Category)
locations = build_router(Location)
