from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from models.user import Role

class UserCreate(BaseModel):
    display_name: str
    login: str
    password: str
    role: Role = Role.USER

class User(BaseModel):
    id: int
    display_name: str
    login: str
    role: Role
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class LoginRequest(BaseModel):
    login: str
    password: str

class SessionIdentity(BaseModel):
    """Snapshot of the user taken at login; not refreshed afterwards."""
    id: int
    display_name: str
    login: str
    role: Role

    class Config:
        frozen = True
        from_attributes = True

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

class LoginResponse(BaseModel):
    token: str
    user: SessionIdentity
