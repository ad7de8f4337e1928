# File: app/services/user_service.py

"""
User resource service.

Implements list / create / get / update / delete on top of a
``UserRepository``. Validation runs before any write; password hashing is
delegated to the injected hasher.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from app.core.errors import (
    EmailAlreadyTakenError,
    FieldError,
    UserNotFoundError,
    UserValidationError,
)
from app.core.security import hash_password
from app.models.user import User
from app.repositories.users import UserRepository
from app.schemas.user import UserCreate, UserUpdate
from app.services.user_validation import validate_user_payload

logger = logging.getLogger(__name__)

EMAIL_TAKEN = FieldError("email", "The email has already been taken.")


class UserService:
    def __init__(
        self,
        repository: UserRepository,
        hasher: Callable[[str], str] = hash_password,
    ):
        self.repository = repository
        self.hasher = hasher

    def list_users(self) -> List[User]:
        return self.repository.list_all()

    def get_user(self, user_id: int) -> User:
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def create_user(self, payload: Optional[Dict[str, Any]]) -> User:
        errors = validate_user_payload(payload, self.repository, require_password=True)
        if errors:
            raise UserValidationError(errors)

        data = UserCreate.model_validate(payload)
        user = User(
            name=data.name,
            email=data.email,
            password=self.hasher(data.password),
        )

        try:
            user = self.repository.insert(user)
        except EmailAlreadyTakenError:
            raise UserValidationError([EMAIL_TAKEN])

        logger.info("Created user id=%s", user.id)
        return user

    def update_user(self, user_id: int, payload: Optional[Dict[str, Any]]) -> User:
        # Existence is checked before the body, so a missing id is a 404 even
        # when the payload is also invalid.
        user = self.get_user(user_id)

        errors = validate_user_payload(
            payload,
            self.repository,
            require_password=False,
            ignore_user_id=user.id,
        )
        if errors:
            raise UserValidationError(errors)

        data = UserUpdate.model_validate(payload)
        user.name = data.name
        user.email = data.email
        if data.password is not None:
            user.password = self.hasher(data.password)

        try:
            user = self.repository.update(user)
        except EmailAlreadyTakenError:
            raise UserValidationError([EMAIL_TAKEN])

        logger.info("Updated user id=%s (password changed: %s)", user_id, data.password is not None)
        return user

    def delete_user(self, user_id: int) -> None:
        user = self.get_user(user_id)
        self.repository.delete(user)
        logger.info("Deleted user id=%s", user_id)
