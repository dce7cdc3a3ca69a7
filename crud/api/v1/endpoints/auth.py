from typing import Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from config import settings
from crud import users
from crud.api.deps import SESSION_COOKIE, get_current_identity, get_session_store, get_session_token
from database import get_db
from schemas.user import LoginRequest, LoginResponse, SessionIdentity
from security import SessionStore

router = APIRouter()

@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    identity = users.authenticate_user(db, credentials.login, credentials.password)
    token = store.create(identity)
    response.set_cookie(
        SESSION_COOKIE,
        token,
        httponly=True,
        samesite="lax",
        max_age=settings.SESSION_TTL_MINUTES * 60,
    )
    return LoginResponse(token=token, user=identity)

@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    store: SessionStore = Depends(get_session_store),
):
    store.destroy(token)
    response.delete_cookie(SESSION_COOKIE)
    response.status_code = status.HTTP_204_NO_CONTENT
    return response

@router.get("/me", response_model=SessionIdentity)
def me(identity: SessionIdentity = Depends(get_current_identity)):
    return identity
