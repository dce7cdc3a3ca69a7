from pydantic import BaseModel, Field
from typing import Literal, Optional
from datetime import datetime

class ComponentBase(BaseModel):
    name: str
    description: Optional[str] = None
    quantity: int = Field(0, ge=0)
    status: Optional[str] = "available"
    category_id: Optional[int] = None
    location_id: Optional[int] = None

class ComponentCreate(ComponentBase):
    pass

class ComponentUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0)
    status: Optional[str] = None
    category_id: Optional[int] = None
    location_id: Optional[int] = None

class Component(ComponentBase):
    id: int
    image_url: Optional[str] = None
    category_name: Optional[str] = None
    location_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class ComponentFilter(BaseModel):
    name: Optional[str] = None
    category_id: Optional[int] = None
    location_id: Optional[int] = None
    order_by: Literal["id", "name"] = "id"
