# File: app/services/user_validation.py

"""
Input validation for user writes.

``validate_user_payload`` runs the field rules declared on the pydantic
schemas, then the email uniqueness rule against the repository, and returns
every failure as a ``FieldError``. It never writes anything.
"""

from typing import Any, Dict, FrozenSet, List, Optional, Type

from pydantic import BaseModel, EmailStr, TypeAdapter, ValidationError

from app.core.errors import FieldError
from app.repositories.users import UserRepository
from app.schemas.user import UserCreate, UserUpdate

_email_adapter = TypeAdapter(EmailStr)


def _message_for(field: str, error: Dict[str, Any], optional: FrozenSet[str] = frozenset()) -> str:
    kind = error["type"]
    ctx = error.get("ctx") or {}
    value = error.get("input")

    # Blank strings count as absent. An optional field that is present but
    # blank is still checked as a string.
    if kind == "missing" or (value in (None, "") and field not in optional):
        return f"The {field} field is required."
    if kind == "string_type" or value in (None, ""):
        return f"The {field} field must be a string."
    if kind == "string_too_short":
        if ctx.get("min_length") == 1:
            return f"The {field} field is required."
        return f"The {field} field must be at least {ctx.get('min_length')} characters."
    if kind == "string_too_long":
        return f"The {field} field must not be greater than {ctx.get('max_length')} characters."
    if field == "email":
        return "The email field must be a valid email address."
    return f"The {field} field is invalid."


def _schema_errors(
    schema: Type[BaseModel],
    payload: Dict[str, Any],
    optional: FrozenSet[str] = frozenset(),
) -> List[FieldError]:
    try:
        schema.model_validate(payload)
    except ValidationError as exc:
        errors = []
        seen = set()
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "body"
            if field in seen:
                continue
            seen.add(field)
            errors.append(FieldError(field, _message_for(field, error, optional)))
        return errors
    return []


def validate_user_payload(
    payload: Optional[Dict[str, Any]],
    repository: UserRepository,
    *,
    require_password: bool = True,
    ignore_user_id: Optional[int] = None,
) -> List[FieldError]:
    """
    Validate a create (``require_password=True``) or update body.

    On update ``password`` may be left out, but a password key that is
    present must hold a real string: ``null`` is rejected, not ignored.
    ``ignore_user_id`` excludes that row from the uniqueness check so a user
    can keep their own email on update.
    """
    payload = payload or {}
    if require_password:
        schema, optional = UserCreate, frozenset()
    else:
        schema, optional = UserUpdate, frozenset({"password"})
    errors = _schema_errors(schema, payload, optional)

    if "password" in optional and "password" in payload and payload["password"] is None:
        errors.append(FieldError("password", "The password field must be a string."))

    if not any(e.field == "email" for e in errors):
        email = _email_adapter.validate_python(payload["email"])
        existing = repository.find_by_email(email)
        if existing is not None and existing.id != ignore_user_id:
            errors.append(FieldError("email", "The email has already been taken."))

    return errors
