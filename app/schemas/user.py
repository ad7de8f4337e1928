# File: app/schemas/user.py

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, EmailStr, Field, StringConstraints

PASSWORD_MIN_LENGTH = 6

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class UserBase(BaseModel):
    name: Name
    email: EmailStr


class UserCreate(UserBase):
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, repr=False)

    class Config:
        strict = True  # no silent coercion of numbers/bools into strings


class UserUpdate(UserBase):
    # Omitted keeps the stored hash; an explicit null is rejected during validation.
    password: Optional[str] = Field(default=None, min_length=PASSWORD_MIN_LENGTH, repr=False)

    class Config:
        strict = True


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    email_verified_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Pydantic v2: replaces orm_mode


class UserResponse(BaseModel):
    result: UserRead


class UserListResponse(BaseModel):
    result: List[UserRead]


class MessageResponse(BaseModel):
    message: str
