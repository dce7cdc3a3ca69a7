import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List

from exceptions import AuthError, NotFoundError, ValidationError
from models.user import Role, User
from schemas.user import SessionIdentity, UserCreate
from security import authorize, hash_password, verify_password

logger = logging.getLogger(__name__)

def authenticate_user(db: Session, login: str, password: str) -> SessionIdentity:
    user = db.query(User).filter(User.login == login).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.info("failed login for %r", login)
        raise AuthError("Invalid username or password")
    logger.info("user %s logged in", user.login)
    return SessionIdentity.model_validate(user)

def get_users(db: Session, actor: SessionIdentity) -> List[User]:
    authorize(actor, Role.ADMIN)
    return db.query(User).order_by(User.id).all()

def get_user_by_display_name(db: Session, display_name: str):
    return db.query(User).filter(User.display_name == display_name).first()

def create_user(db: Session, actor: SessionIdentity, user: UserCreate) -> User:
    authorize(actor, Role.ADMIN)
    display_name = user.display_name.strip()
    login = user.login.strip()
    if not display_name or not login or not user.password:
        raise ValidationError("Name, username and password are required")
    if db.query(User).filter(User.login == login).first():
        raise ValidationError("User already exists")

    db_user = User(
        display_name=display_name,
        login=login,
        password_hash=hash_password(user.password),
        role=user.role,
    )
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError("User already exists")
    db.refresh(db_user)
    logger.info("user %s created by %s", db_user.login, actor.login)
    return db_user

def delete_user(db: Session, actor: SessionIdentity, user_id: int) -> None:
    authorize(actor, Role.ADMIN)
    db_user = db.query(User).filter(User.id == user_id).first()
    if db_user is None:
        raise NotFoundError("User not found")
    login = db_user.login
    db.delete(db_user)
    db.commit()
    logger.info("user %s deleted by %s", login, actor.login)
