import logging
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional

from crud.filters import component_clauses, component_ordering
from exceptions import AssetStoreError, ComponentNotFound, ValidationError
from models.inventory import Category, Component, Location
from models.ledger import Movement
from models.user import Role
from schemas.inventory import ComponentCreate, ComponentFilter, ComponentUpdate
from schemas.user import SessionIdentity
from security import authorize
from utils.asset_store import asset_id_from_url

logger = logging.getLogger(__name__)

def _check_references(db: Session, category_id: Optional[int], location_id: Optional[int]) -> None:
    if category_id is not None and db.get(Category, category_id) is None:
        raise ValidationError(f"Category {category_id} does not exist")
    if location_id is not None and db.get(Location, location_id) is None:
        raise ValidationError(f"Location {location_id} does not exist")

def get_components(db: Session, actor: SessionIdentity, filters: Optional[ComponentFilter] = None) -> List[Component]:
    authorize(actor)
    filters = filters or ComponentFilter()
    query = db.query(Component).options(
        joinedload(Component.category),
        joinedload(Component.location),
    )
    clauses = component_clauses(filters)
    if clauses:
        query = query.filter(*clauses)
    return query.order_by(*component_ordering(filters)).all()

def get_component(db: Session, actor: SessionIdentity, component_id: int) -> Component:
    authorize(actor)
    db_item = db.query(Component).options(
        joinedload(Component.category),
        joinedload(Component.location),
    ).filter(Component.id == component_id).first()
    if db_item is None:
        raise ComponentNotFound()
    return db_item

def create_component(
    db: Session,
    actor: SessionIdentity,
    item: ComponentCreate,
    image: Optional[bytes] = None,
    assets=None,
) -> Component:
    authorize(actor, Role.ADMIN)
    if not item.name or not item.name.strip():
        raise ValidationError("Component name is required")
    _check_references(db, item.category_id, item.location_id)

    image_url = None
    if image:
        if assets is None:
            raise AssetStoreError("No image store configured")
        image_url = assets.upload(image)

    db_item = Component(**item.model_dump(), image_url=image_url)
    db_item.name = db_item.name.strip()
    db.add(db_item)
    try:
        db.commit()
    except Exception:
        db.rollback()
        if image_url:
            logger.error("component insert failed after upload; orphaned image %s", image_url)
        raise
    db.refresh(db_item)
    logger.info("component %s (%s) created by %s", db_item.id, db_item.name, actor.login)
    return db_item

def update_component(
    db: Session,
    actor: SessionIdentity,
    component_id: int,
    item_update: ComponentUpdate,
    image: Optional[bytes] = None,
    assets=None,
) -> Component:
    authorize(actor, Role.ADMIN)
    db_item = db.query(Component).filter(Component.id == component_id).first()
    if db_item is None:
        raise ComponentNotFound()

    update_data = item_update.model_dump(exclude_unset=True)
    if "name" in update_data:
        if not update_data["name"] or not update_data["name"].strip():
            raise ValidationError("Component name is required")
        update_data["name"] = update_data["name"].strip()
    if "quantity" in update_data and update_data["quantity"] is None:
        raise ValidationError("Quantity cannot be empty")
    _check_references(db, update_data.get("category_id"), update_data.get("location_id"))

    if image:
        if assets is None:
            raise AssetStoreError("No image store configured")
        update_data["image_url"] = assets.upload(image)

    for key, value in update_data.items():
        setattr(db_item, key, value)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_item)
    return db_item

def delete_component(db: Session, actor: SessionIdentity, component_id: int, assets=None) -> None:
    authorize(actor, Role.ADMIN)
    db_item = db.query(Component).filter(Component.id == component_id).first()
    if db_item is None:
        raise ComponentNotFound()

    removed = db.query(Movement).filter(Movement.component_id == component_id).delete(synchronize_session=False)

    asset_id = asset_id_from_url(db_item.image_url)
    if asset_id and assets is not None:
        try:
            assets.delete(asset_id)
        except AssetStoreError as e:
            logger.warning("could not delete image %s of component %s: %s", asset_id, component_id, e)
    elif db_item.image_url:
        logger.warning("skipping image cleanup for component %s: %r", component_id, db_item.image_url)

    db.delete(db_item)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("component %s deleted by %s with %d movements", component_id, actor.login, removed)
