"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before ``create_all`` runs.
"""

import logging
import secrets
import string
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from app.core.security import hash_password
from app.db.session import engine
from app.models.base import Base
from app.models.user import User

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "rahasia"

DEMO_USERS = [
    ("John Doe", "john@example.com"),
    ("Jane Doe", "jane@example.com"),
    ("Alice Smith", "alice@example.com"),
    ("Bob Johnson", "bob@example.com"),
]

_TOKEN_ALPHABET = string.ascii_letters + string.digits


def init_db() -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)


def _random_token(length: int = 10) -> str:
    return "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(length))


def seed_initial_data(db: Session) -> int:
    """
    Insert the demo users, skipping any whose email is already present.

    Returns the number of rows inserted.
    """
    now = datetime.now(timezone.utc)
    inserted = 0

    for name, email in DEMO_USERS:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            continue

        db.add(
            User(
                name=name,
                email=email,
                email_verified_at=now,
                password=hash_password(DEMO_PASSWORD),
                remember_token=_random_token(),
            )
        )
        inserted += 1

    db.commit()
    logger.info("Seeded %d demo users", inserted)
    return inserted
