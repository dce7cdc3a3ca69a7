from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from crud import users
from crud.api.deps import get_current_identity
from database import get_db
from schemas.user import SessionIdentity, User, UserCreate

router = APIRouter()

@router.get("/", response_model=List[User])
def list_users(identity: SessionIdentity = Depends(get_current_identity), db: Session = Depends(get_db)):
    return users.get_users(db, identity)

@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, identity: SessionIdentity = Depends(get_current_identity), db: Session = Depends(get_db)):
    return users.create_user(db, identity, user)

@router.delete("/{user_id}")
def delete_user(user_id: int, identity: SessionIdentity = Depends(get_current_identity), db: Session = Depends(get_db)):
    users.delete_user(db, identity, user_id)
    return {"status": "success"}
