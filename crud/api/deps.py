from typing import Optional
from fastapi import Cookie, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from schemas.user import SessionIdentity
from security import SessionStore, session_store

SESSION_COOKIE = "session_token"
LOGIN_PATH = "/api/v1/auth/login"

bearer = HTTPBearer(auto_error=False)

def get_session_store() -> SessionStore:
    return session_store

def get_session_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    session_token: Optional[str] = Cookie(None),
) -> Optional[str]:
    if credentials is not None:
        return credentials.credentials
    return session_token

def get_current_identity(
    token: Optional[str] = Depends(get_session_token),
    store: SessionStore = Depends(get_session_store),
) -> SessionIdentity:
    identity = store.get(token)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer", "Location": LOGIN_PATH},
        )
    return identity
