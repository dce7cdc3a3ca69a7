import logging
from sqlalchemy.orm import Session
from typing import List, Type, Union

from exceptions import NotFoundError, ValidationError
from models.inventory import Category, Location
from models.user import Role
from schemas.user import SessionIdentity
from security import authorize

logger = logging.getLogger(__name__)

TermModel = Type[Union[Category, Location]]

def _clean_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Name is required")
    return name

def _get_term(db: Session, model: TermModel, term_id: int):
    term = db.query(model).filter(model.id == term_id).first()
    if term is None:
        raise NotFoundError(f"{model.__name__} not found")
    return term

def get_terms(db: Session, actor: SessionIdentity, model: TermModel) -> List:
    authorize(actor)
    return db.query(model).order_by(model.name, model.id).all()

def create_term(db: Session, actor: SessionIdentity, model: TermModel, name: str):
    authorize(actor, Role.ADMIN)
    term = model(name=_clean_name(name))
    db.add(term)
    db.commit()
    db.refresh(term)
    logger.info("%s %r created by %s", model.__name__.lower(), term.name, actor.login)
    return term

def rename_term(db: Session, actor: SessionIdentity, model: TermModel, term_id: int, name: str):
    authorize(actor, Role.ADMIN)
    term = _get_term(db, model, term_id)
    term.name = _clean_name(name)
    db.commit()
    db.refresh(term)
    return term

def delete_term(db: Session, actor: SessionIdentity, model: TermModel, term_id: int) -> None:
    authorize(actor, Role.ADMIN)
    term = _get_term(db, model, term_id)
    db.delete(term)
    db.commit()
    logger.info("%s %s deleted by %s", model.__name__.lower(), term_id, actor.login)
