"""
Movement ledger.

Stock changes are applied with a single guarded UPDATE so that concurrent
loans or exits can never push a component's quantity below zero: the check
and the write happen in the same statement, and the movement row is inserted
in the same transaction.
"""
import logging
from sqlalchemy.orm import Session, contains_eager, joinedload
from typing import List, Optional

from crud.filters import movement_clauses, movement_ordering
from crud.users import get_user_by_display_name
from exceptions import (
    ComponentNotFound,
    InsufficientStock,
    InvalidMovementKind,
    InvalidQuantity,
    MovementNotFound,
    UnknownPerson,
)
from models.inventory import Component
from models.ledger import Movement, MovementKind
from models.user import Role
from schemas.ledger import MovementFilter
from schemas.user import SessionIdentity
from security import authorize

logger = logging.getLogger(__name__)


def parse_quantity(value) -> int:
    """Accept positive ints, or strings holding one; reject anything else."""
    if isinstance(value, bool):
        raise InvalidQuantity()
    if isinstance(value, str):
        value = value.strip()
        # ASCII digits only; isdigit() also admits superscripts like "²"
        if not (value.isascii() and value.isdecimal()):
            raise InvalidQuantity()
        quantity = int(value)
    elif isinstance(value, int):
        quantity = value
    else:
        raise InvalidQuantity()
    if quantity <= 0:
        raise InvalidQuantity()
    return quantity


def parse_kind(value) -> MovementKind:
    try:
        return MovementKind(value)
    except ValueError:
        raise InvalidMovementKind(f"Invalid movement kind: {value!r}")


def apply_stock_delta(db: Session, component_id: int, delta: int) -> bool:
    """
    Add ``delta`` to the component's quantity unless the result would be negative.

    Returns False when no row was changed. Does not commit.
    """
    updated = (
        db.query(Component)
        .filter(Component.id == component_id, Component.quantity + delta >= 0)
        .update({Component.quantity: Component.quantity + delta}, synchronize_session=False)
    )
    return updated == 1


def record_movement(
    db: Session,
    actor: SessionIdentity,
    component_id: int,
    kind,
    quantity,
    person: Optional[str] = None,
    notes: Optional[str] = None,
) -> Movement:
    authorize(actor, Role.ADMIN)
    quantity = parse_quantity(quantity)

    person = (person or "").strip() or None
    if person and get_user_by_display_name(db, person) is None:
        logger.info("movement rejected: unknown person %r", person)
        raise UnknownPerson()

    component = db.query(Component).filter(Component.id == component_id).first()
    if component is None:
        raise ComponentNotFound()
    component_name = component.name

    movement_kind = parse_kind(kind)
    delta = movement_kind.sign * quantity

    try:
        applied = apply_stock_delta(db, component_id, delta)
        if applied:
            db_movement = Movement(
                component_id=component_id,
                kind=movement_kind,
                quantity=quantity,
                person=person,
                notes=notes or None,
            )
            db.add(db_movement)
            db.commit()
        else:
            db.rollback()
    except Exception:
        db.rollback()
        raise

    if not applied:
        if db.query(Component.id).filter(Component.id == component_id).first() is None:
            raise ComponentNotFound()
        logger.info(
            "movement rejected: %s of %d exceeds stock of component %s",
            movement_kind.value, quantity, component_id,
        )
        raise InsufficientStock()

    db.refresh(db_movement)
    logger.info(
        "%s of %d recorded for component %s (%s) by %s",
        movement_kind.value, quantity, component_id, component_name, actor.login,
    )
    return db_movement


def return_loan(db: Session, actor: SessionIdentity, movement_id: int, notes: Optional[str] = None) -> Movement:
    # TODO: reject movements that are not loans, or loans already returned,
    # once the ledger links each return to the loan it settles.
    authorize(actor, Role.ADMIN)
    loan = db.query(Movement).filter(Movement.id == movement_id).first()
    if loan is None:
        raise MovementNotFound()

    try:
        if not apply_stock_delta(db, loan.component_id, loan.quantity):
            raise ComponentNotFound()
        db_movement = Movement(
            component_id=loan.component_id,
            kind=MovementKind.RETURN,
            quantity=loan.quantity,
            person=loan.person,
            notes=notes or None,
        )
        db.add(db_movement)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(db_movement)
    logger.info("return of movement %s recorded by %s", movement_id, actor.login)
    return db_movement


def get_movement(db: Session, actor: SessionIdentity, movement_id: int) -> Movement:
    authorize(actor)
    db_movement = (
        db.query(Movement)
        .options(joinedload(Movement.component))
        .filter(Movement.id == movement_id)
        .first()
    )
    if db_movement is None:
        raise MovementNotFound()
    return db_movement


def get_movements(db: Session, actor: SessionIdentity, filters: Optional[MovementFilter] = None) -> List[Movement]:
    authorize(actor)
    filters = filters or MovementFilter()
    query = db.query(Movement).join(Movement.component).options(contains_eager(Movement.component))
    clauses = movement_clauses(filters)
    if clauses:
        query = query.filter(*clauses)
    return query.order_by(*movement_ordering()).all()
