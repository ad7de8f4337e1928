# File: app/core/errors.py

"""
Domain errors and their HTTP rendering.

Services raise the exceptions below; ``register_exception_handlers`` turns
them into JSON responses so route functions stay free of status-code logic.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "User not found"


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class UserNotFoundError(Exception):
    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class EmailAlreadyTakenError(Exception):
    """The storage layer rejected a row because its email is already in use."""

    def __init__(self, email: str):
        super().__init__("email already taken")
        self.email = email


class UserValidationError(Exception):
    def __init__(self, errors: List[FieldError]):
        super().__init__(f"{len(errors)} validation error(s)")
        self.errors = list(errors)


def validation_error_body(errors: List[FieldError]) -> dict:
    """
    Build the 422 payload:

        {"message": "<first message> (and N more errors)",
         "errors": {"<field>": ["<message>", ...]}}
    """
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        grouped.setdefault(error.field, []).append(error.message)

    message = errors[0].message if errors else "The given data was invalid."
    remaining = len(errors) - 1
    if remaining > 0:
        noun = "error" if remaining == 1 else "errors"
        message = f"{message} (and {remaining} more {noun})"

    return {"message": message, "errors": grouped}


def _request_errors_to_field_errors(exc: RequestValidationError) -> List[FieldError]:
    field_errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        field = ".".join(loc) or "body"
        field_errors.append(FieldError(field, f"The {field} field is invalid."))
    return field_errors


async def user_not_found_handler(request: Request, exc: UserNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": USER_NOT_FOUND_MESSAGE},
    )


async def user_validation_handler(request: Request, exc: UserValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=validation_error_body(exc.errors),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected malformed request to %s", request.url.path)
    return JSONResponse(
        status_code=422,
        content=validation_error_body(_request_errors_to_field_errors(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UserNotFoundError, user_not_found_handler)
    app.add_exception_handler(UserValidationError, user_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
