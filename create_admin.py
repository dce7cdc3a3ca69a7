#!/usr/bin/env python3
"""Create the first administrator account"""

import logging
import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config import settings
from database import Base, SessionLocal, engine
from models.user import Role, User
from security import hash_password

logger = logging.getLogger(__name__)

def create_admin(db) -> bool:
    """Insert the configured admin unless that login already exists. Returns True when created."""
    if db.query(User).filter(User.login == settings.ADMIN_LOGIN).first():
        return False
    db.add(User(
        display_name=settings.ADMIN_DISPLAY_NAME,
        login=settings.ADMIN_LOGIN,
        password_hash=hash_password(settings.ADMIN_PASSWORD),
        role=Role.ADMIN,
    ))
    db.commit()
    return True

def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if create_admin(db):
            logger.info("admin created: %s", settings.ADMIN_LOGIN)
        else:
            logger.info("admin %s already exists", settings.ADMIN_LOGIN)
    except Exception:
        db.rollback()
        logger.exception("error creating admin")
        raise
    finally:
        db.close()

if __name__ == "__main__":
    main()
