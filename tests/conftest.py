# File: tests/conftest.py

"""
Shared fixtures.

The environment is set before anything from ``app`` is imported so the
settings, engine and bcrypt cost pick up the test values.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.errors import EmailAlreadyTakenError  # noqa: E402
from app.db.session import SessionLocal, engine  # noqa: E402
from app.main import app  # noqa: E402
from app.models.base import Base  # noqa: E402


class FakeUserRepository:
    """In-memory stand-in for SQLAlchemyUserRepository."""

    def __init__(self):
        self.rows = {}
        self._next_id = 1

    def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    def find_by_id(self, user_id):
        return self.rows.get(user_id)

    def find_by_email(self, email):
        return next((u for u in self.rows.values() if u.email == email), None)

    def insert(self, user):
        if self.find_by_email(user.email) is not None:
            raise EmailAlreadyTakenError(user.email)
        user.id = self._next_id
        self._next_id += 1
        user.created_at = user.updated_at = datetime.now(timezone.utc)
        self.rows[user.id] = user
        return user

    def update(self, user):
        other = self.find_by_email(user.email)
        if other is not None and other is not user:
            raise EmailAlreadyTakenError(user.email)
        user.updated_at = datetime.now(timezone.utc)
        self.rows[user.id] = user
        return user

    def delete(self, user):
        del self.rows[user.id]


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def fake_repository():
    return FakeUserRepository()
