"""
Pytest fixtures for the inventory test suite.

Provides:
- A throwaway SQLite database, recreated for every test
- Admin and regular identities plus matching user rows
- Seeded categories, locations and components
- Fake asset store and mailer standing in for Cloudinary and SMTP
- An HTTP client with helpers to log in as either role

The database URL is set before any application module is imported, because
``database.py`` builds its engine at import time.
"""
import os
import tempfile

_TEST_DIR = tempfile.mkdtemp(prefix="lab-inventory-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DIR, 'inventory.db')}"
os.environ["CONTACT_EMAIL"] = "lab@example.com"
os.environ["SMTP_USERNAME"] = "inventory@example.com"
os.environ["LOG_LEVEL"] = "DEBUG"

import pytest

from database import Base, SessionLocal, engine
from exceptions import AssetStoreError
from models.inventory import Category, Component, Location
from models.user import Role, User
from schemas.user import SessionIdentity
from security import hash_password, session_store

ADMIN_PASSWORD = "adminpass123"
USER_PASSWORD = "userpass123"


class FakeAssetStore:
    """Records uploads and deletions instead of calling Cloudinary."""

    def __init__(self):
        self.uploaded = []
        self.deleted = []
        self.fail_upload = False
        self.fail_delete = False

    def upload(self, data: bytes) -> str:
        if self.fail_upload:
            raise AssetStoreError("Image upload failed")
        self.uploaded.append(data)
        return f"https://res.cloudinary.com/demo/image/upload/v1700000000/inventario/img{len(self.uploaded)}.png"

    def delete(self, asset_id: str) -> None:
        if self.fail_delete:
            raise AssetStoreError("Image deletion failed")
        self.deleted.append(asset_id)


class FakeMailer:
    def __init__(self, result: bool = True):
        self.result = result
        self.sent = []

    def send_email(self, from_addr, to_addr, subject, body) -> bool:
        self.sent.append({"from": from_addr, "to": to_addr, "subject": subject, "body": body})
        return self.result


# =============================================================================
# Database
# =============================================================================


@pytest.fixture
def db():
    """Fresh schema and an open session for each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def _clear_sessions():
    session_store.clear()
    yield
    session_store.clear()


# =============================================================================
# Users and identities
# =============================================================================


@pytest.fixture
def admin_user(db):
    user = User(
        display_name="Laura Docente",
        login="admin",
        password_hash=hash_password(ADMIN_PASSWORD),
        role=Role.ADMIN,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def regular_user(db):
    user = User(
        display_name="Ana",
        login="ana",
        password_hash=hash_password(USER_PASSWORD),
        role=Role.USER,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin(admin_user):
    return SessionIdentity.model_validate(admin_user)


@pytest.fixture
def user(regular_user):
    return SessionIdentity.model_validate(regular_user)


# =============================================================================
# Catalog data
# =============================================================================


@pytest.fixture
def categories(db):
    items = [Category(name="Sensors"), Category(name="Boards"), Category(name="Cables")]
    db.add_all(items)
    db.commit()
    return {c.name: c.id for c in items}


@pytest.fixture
def locations(db):
    items = [Location(name="Shelf A"), Location(name="Cabinet 2")]
    db.add_all(items)
    db.commit()
    return {l.name: l.id for l in items}


@pytest.fixture
def components(db, categories, locations):
    items = [
        Component(name="Arduino Uno", quantity=10, category_id=categories["Boards"], location_id=locations["Shelf A"]),
        Component(name="Arduino Nano", quantity=6, category_id=categories["Boards"], location_id=locations["Cabinet 2"]),
        Component(name="Ultrasonic sensor", quantity=15, category_id=categories["Sensors"], location_id=locations["Shelf A"]),
        Component(name="USB cable", quantity=30, category_id=None, location_id=None),
        Component(name="arduino shield kit", quantity=2, category_id=categories["Sensors"], location_id=None),
    ]
    db.add_all(items)
    db.commit()
    return {c.name: c.id for c in items}


@pytest.fixture
def arduino(components):
    return components["Arduino Uno"]


# =============================================================================
# Collaborators and HTTP
# =============================================================================


@pytest.fixture
def asset_store():
    return FakeAssetStore()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def client(db, asset_store, mailer):
    from fastapi.testclient import TestClient

    from main import app
    from utils.asset_store import get_asset_store
    from utils.email_service import get_email_service

    app.dependency_overrides[get_asset_store] = lambda: asset_store
    app.dependency_overrides[get_email_service] = lambda: mailer
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _login(client, login, password):
    response = client.post("/api/v1/auth/login", json={"login": login, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def admin_headers(client, admin_user):
    return _login(client, admin_user.login, ADMIN_PASSWORD)


@pytest.fixture
def user_headers(client, regular_user):
    return _login(client, regular_user.login, USER_PASSWORD)
