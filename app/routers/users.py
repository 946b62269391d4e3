"""
User endpoints — thin HTTP layer, one port call per handler.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.dependencies import get_user_store
from app.domain.errors import PersistenceError
from app.domain.models import (
    MessageResponse,
    User,
    UserCreate,
    UserCreatedResponse,
    UserDeletedResponse,
    UserNotFound,
    UserUpdate,
    UserUpdatedResponse,
)
from app.ports.user_port import UserPort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])

_NOT_FOUND_MESSAGE = "User not found"

_ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse},
}


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _store_failure(action: str, exc: PersistenceError) -> JSONResponse:
    logger.error(f"Store failure while {action}: {exc.message}")
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


def _not_found(result: UserNotFound) -> JSONResponse:
    logger.info(f"User {result.user_id} not found")
    return _message(status.HTTP_404_NOT_FOUND, _NOT_FOUND_MESSAGE)


@router.get("", response_model=list[User], responses=_ERROR_RESPONSES)
async def list_users(store: UserPort = Depends(get_user_store)):
    """Return every user in the collection."""
    try:
        return await store.list_users()
    except PersistenceError as exc:
        return _store_failure("listing users", exc)


@router.post(
    "",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_user(body: UserCreate, store: UserPort = Depends(get_user_store)):
    """Insert a user; the store assigns its id."""
    try:
        user = await store.create_user(body)
    except PersistenceError as exc:
        return _store_failure("creating user", exc)

    logger.info(f"Created user {user.id}")
    return UserCreatedResponse(createdUser=user)


@router.put("/{user_id}", response_model=UserUpdatedResponse, responses=_ERROR_RESPONSES)
async def update_user(
    user_id: str,
    body: UserUpdate,
    store: UserPort = Depends(get_user_store),
):
    """Apply the supplied fields to a user and return the updated record."""
    try:
        result = await store.update_user(user_id, body)
    except PersistenceError as exc:
        return _store_failure(f"updating user {user_id}", exc)

    if isinstance(result, UserNotFound):
        return _not_found(result)
    return UserUpdatedResponse(updatedUser=result.user)


@router.delete("/{user_id}", response_model=UserDeletedResponse, responses=_ERROR_RESPONSES)
async def delete_user(user_id: str, store: UserPort = Depends(get_user_store)):
    """Remove a user and return the record as it was."""
    try:
        result = await store.delete_user(user_id)
    except PersistenceError as exc:
        return _store_failure(f"deleting user {user_id}", exc)

    if isinstance(result, UserNotFound):
        return _not_found(result)

    logger.info(f"Deleted user {user_id}")
    return UserDeletedResponse(deletedUser=result.user)
