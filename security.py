import logging
import secrets
import threading
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple

from werkzeug.security import check_password_hash, generate_password_hash

from config import settings
from exceptions import AuthError, ForbiddenError
from models.user import Role
from schemas.user import SessionIdentity

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return check_password_hash(password_hash, password)


def authorize(identity: Optional[SessionIdentity], required_role: Optional[Role] = None) -> SessionIdentity:
    """Ensure the caller is logged in and, when given, holds ``required_role``."""
    if identity is None:
        raise AuthError("Authentication required")
    if required_role is not None and identity.role != required_role:
        logger.info("user %s denied: requires role %s", identity.login, required_role.value)
        raise ForbiddenError("Access denied")
    return identity


class SessionStore:
    """
    In-memory map of opaque session tokens to identity snapshots.

    Tokens expire ``ttl`` after creation; expired entries are dropped lazily on lookup.
    """

    def __init__(self, ttl: timedelta):
        self.ttl = ttl
        self._sessions: Dict[str, Tuple[SessionIdentity, datetime]] = {}
        self._lock = threading.Lock()

    def create(self, identity: SessionIdentity) -> str:
        token = secrets.token_urlsafe(32)
        expires_at = datetime.now(timezone.utc) + self.ttl
        with self._lock:
            self._sessions[token] = (identity, expires_at)
        return token

    def get(self, token: Optional[str]) -> Optional[SessionIdentity]:
        if not token:
            return None
        with self._lock:
            entry = self._sessions.get(token)
            if entry is None:
                return None
            identity, expires_at = entry
            if expires_at <= datetime.now(timezone.utc):
                del self._sessions[token]
                return None
            return identity

    def destroy(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            self._sessions.pop(token, None)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


session_store = SessionStore(timedelta(minutes=settings.SESSION_TTL_MINUTES))
