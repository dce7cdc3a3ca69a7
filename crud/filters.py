"""
Predicate builders for the listing queries.

Each builder turns a filter schema into a list of SQLAlchemy clauses with
bound parameters. Clauses are combined with AND by the caller, so listings,
exports and tests all share the same predicate.
"""
from datetime import datetime, timedelta
from typing import List

from sqlalchemy import ColumnElement

from models.inventory import Component
from models.ledger import Movement
from schemas.inventory import ComponentFilter
from schemas.ledger import MovementFilter


def component_clauses(filters: ComponentFilter) -> List[ColumnElement]:
    clauses = []
    if filters.name:
        clauses.append(Component.name.ilike(f"%{filters.name.strip()}%"))
    if filters.category_id is not None:
        clauses.append(Component.category_id == filters.category_id)
    if filters.location_id is not None:
        clauses.append(Component.location_id == filters.location_id)
    return clauses


def component_ordering(filters: ComponentFilter):
    if filters.order_by == "name":
        return [Component.name.asc(), Component.id.asc()]
    return [Component.id.asc()]


def movement_clauses(filters: MovementFilter) -> List[ColumnElement]:
    clauses = []
    if filters.person:
        clauses.append(Movement.person.ilike(f"%{filters.person.strip()}%"))
    if filters.date_from:
        # exclusive bound at the end of the previous day, so "HH:MM:SS" midnight rows match
        day_before = filters.date_from - timedelta(days=1)
        clauses.append(Movement.created_at > datetime.combine(day_before, datetime.max.time()))
    if filters.date_to:
        clauses.append(Movement.created_at <= datetime.combine(filters.date_to, datetime.max.time()))
    if filters.component_id is not None:
        clauses.append(Movement.component_id == filters.component_id)
    return clauses


def movement_ordering():
    return [Movement.created_at.desc(), Movement.id.desc()]
