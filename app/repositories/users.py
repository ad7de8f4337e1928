# File: app/repositories/users.py

"""
Persistence for User rows.

The service layer talks to the ``UserRepository`` protocol only, so it can
run against the SQLAlchemy implementation below or an in-memory fake.
"""

import logging
from typing import List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import EmailAlreadyTakenError
from app.models.user import User

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    def list_all(self) -> List[User]: ...

    def find_by_id(self, user_id: int) -> Optional[User]: ...

    def find_by_email(self, email: str) -> Optional[User]: ...

    def insert(self, user: User) -> User: ...

    def update(self, user: User) -> User: ...

    def delete(self, user: User) -> None: ...


class SQLAlchemyUserRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[User]:
        return list(self.db.scalars(select(User).order_by(User.id)))

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.scalars(select(User).where(User.email == email)).first()

    def insert(self, user: User) -> User:
        self.db.add(user)
        self._commit(user)
        self.db.refresh(user)
        return user

    def update(self, user: User) -> User:
        self._commit(user)
        self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self.db.commit()

    def _commit(self, user: User) -> None:
        # The unique index on users.email is the real guard against two
        # requests claiming the same address at once.
        user_id, email = user.id, user.email
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Unique constraint rejected write for user id=%s: %s", user_id, e.orig)
            raise EmailAlreadyTakenError(email) from e
