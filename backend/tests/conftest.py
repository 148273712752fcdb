"""Shared fixtures: an in-memory SQLite database and a TestClient bound to it."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ALLOWED_HOSTS"] = '["*"]'
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"

from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.core.database import Base, SessionLocal, engine
from app.core.security import create_access_token, get_password_hash
from app.main import app
from app.models.property import PropertyType
from app.models.user import UserRole
from app.services import listings
from app.services.users import create_user

PASSWORD = "Sup3r-Secret-Pass!"
BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    return TestClient(app)


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(role: UserRole = UserRole.user, email: str | None = None):
        counter["n"] += 1
        return create_user(
            db,
            email=email or f"{role.value}{counter['n']}@example.com",
            first_name=role.value.title(),
            hashed_password=get_password_hash(PASSWORD),
            role=role,
        )

    return _make


@pytest.fixture
def auth_headers():
    def _headers(user) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _headers


@pytest.fixture
def make_property(db):
    """Insert a listing; each call is one day newer than the previous one."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "title": f"Listing {counter['n']}",
            "description": "Bright home close to schools",
            "address": f"{counter['n']} Main St",
            "city": "Austin",
            "state": "TX",
            "zip_code": "78701",
            "price": Decimal("350000"),
            "bedrooms": 3,
            "bathrooms": Decimal("2.0"),
            "sqft": 1800,
            "property_type": PropertyType.house,
            "created_at": BASE_TIME + timedelta(days=counter["n"]),
        }
        data.update(overrides)
        return listings.create_property(db, data)

    return _make
