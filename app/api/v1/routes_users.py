# File: app/api/v1/routes_users.py

"""
User resource endpoints.

Bodies are taken as plain JSON objects and validated by the service, which
lets update look the user up before checking the payload.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from app.api.deps import get_user_service
from app.schemas.user import MessageResponse, UserListResponse, UserResponse
from app.services.user_service import UserService

router = APIRouter()

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse, "description": "User not found"}}


@router.get("", response_model=UserListResponse, summary="Get list of users")
def list_users(service: UserService = Depends(get_user_service)):
    return {"result": service.list_users()}


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
def create_user(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: UserService = Depends(get_user_service),
):
    service.create_user(payload)
    return {"message": "User created successfully"}


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Get user by ID",
)
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return {"result": service.get_user(user_id)}


@router.put(
    "/{user_id}",
    response_model=MessageResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Update a user",
)
def update_user(
    user_id: int,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: UserService = Depends(get_user_service),
):
    service.update_user(user_id, payload)
    return {"message": "User updated successfully"}


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a user",
)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    service.delete_user(user_id)
    return {"message": "User deleted successfully"}
