from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session
from typing import List, Literal, Optional

from crud import inventory
from crud.api.deps import get_current_identity
from database import get_db
from exceptions import ValidationError
from schemas.inventory import Component, ComponentCreate, ComponentFilter, ComponentUpdate
from schemas.user import SessionIdentity
from utils.asset_store import get_asset_store

router = APIRouter()

CLEARABLE_FIELDS = ("description", "category_id", "location_id")

def _read_image(image: Optional[UploadFile]) -> Optional[bytes]:
    if image is None or not image.filename:
        return None
    return image.file.read() or None

def _build(schema, data: dict):
    try:
        return schema(**data)
    except PydanticValidationError as e:
        raise ValidationError(str(e.errors()[0]["msg"]))

@router.get("/", response_model=List[Component])
def list_components(
    name: Optional[str] = Query(None, description="Case-insensitive name substring"),
    category_id: Optional[int] = None,
    location_id: Optional[int] = None,
    order_by: Literal["id", "name"] = "id",
    identity: SessionIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    filters = ComponentFilter(name=name, category_id=category_id, location_id=location_id, order_by=order_by)
    return inventory.get_components(db, identity, filters)

@router.get("/{component_id}", response_model=Component)
def get_component(component_id: int, identity: SessionIdentity = Depends(get_current_identity), db: Session = Depends(get_db)):
    return inventory.get_component(db, identity, component_id)

@router.post("/", response_model=Component, status_code=201)
def create_component(
    name: str = Form(...),
    description: Optional[str] = Form(None),
    quantity: int = Form(0),
    status: Optional[str] = Form("available"),
    category_id: Optional[int] = Form(None),
    location_id: Optional[int] = Form(None),
    image: Optional[UploadFile] = File(None),
    identity: SessionIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
    assets=Depends(get_asset_store),
):
    item = _build(ComponentCreate, {
        "name": name,
        "description": description,
        "quantity": quantity,
        "status": status,
        "category_id": category_id,
        "location_id": location_id,
    })
    return inventory.create_component(db, identity, item, _read_image(image), assets)

@router.put("/{component_id}", response_model=Component)
def update_component(
    component_id: int,
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    quantity: Optional[int] = Form(None),
    status: Optional[str] = Form(None),
    category_id: Optional[int] = Form(None),
    location_id: Optional[int] = Form(None),
    clear: List[str] = Form([], description="Fields to reset to null: description, category_id, location_id"),
    image: Optional[UploadFile] = File(None),
    identity: SessionIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
    assets=Depends(get_asset_store),
):
    fields = {
        "name": name,
        "description": description,
        "quantity": quantity,
        "status": status,
        "category_id": category_id,
        "location_id": location_id,
    }
    data = {key: value for key, value in fields.items() if value is not None}
    for key in clear:
        if key not in CLEARABLE_FIELDS:
            raise ValidationError(f"Field {key!r} cannot be cleared")
        if key in data:
            raise ValidationError(f"Field {key!r} cannot be both set and cleared")
        data[key] = None
    item_update = _build(ComponentUpdate, data)
    return inventory.update_component(db, identity, component_id, item_update, _read_image(image), assets)

@router.delete("/{component_id}")
def delete_component(
    component_id: int,
    identity: SessionIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
    assets=Depends(get_asset_store),
):
    inventory.delete_component(db, identity, component_id, assets)
    return {"status": "success"}
