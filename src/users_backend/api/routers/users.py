"""CRUD endpoints for user records."""

from __future__ import annotations

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from users_backend.api.dependencies import parse_user_id, sanitized_update
from users_backend.api.errors import UserNotFoundError
from users_backend.api.models import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from users_backend.database import UserRepository, UserSchema, get_user_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

RepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
UserIdDep = Annotated[UUID, Depends(parse_user_id)]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_user(
    repository: RepositoryDep,
    payload: UserCreateRequest | None = None,
) -> UserResponse:
    """Store a new user built from any subset of its fields."""

    fields = (payload or UserCreateRequest()).model_dump(exclude_unset=True)
    user = repository.insert(UserSchema(**fields))
    logger.info("Created user %s", user.id)
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("", response_model=list[UserResponse])
def list_users(repository: RepositoryDep) -> list[UserResponse]:
    """Return every stored user."""

    return [
        UserResponse.model_validate(user, from_attributes=True)
        for user in repository.find_all()
    ]


@router.get("/by-age", response_model=list[UserResponse])
def list_users_by_age(
    repository: RepositoryDep,
    min_age: Annotated[int, Query(alias="minAge")],
    max_age: Annotated[int, Query(alias="maxAge")],
) -> list[UserResponse]:
    """Return users whose age lies between ``minAge`` and ``maxAge`` inclusive."""

    return [
        UserResponse.model_validate(user, from_attributes=True)
        for user in repository.find_by_age_range(min_age, max_age)
    ]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: UserIdDep, repository: RepositoryDep) -> UserResponse:
    """Return a single user by ID."""

    user = repository.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError()
    return UserResponse.model_validate(user, from_attributes=True)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: UserIdDep,
    repository: RepositoryDep,
    payload: Annotated[UserUpdateRequest, Depends(sanitized_update)],
) -> UserResponse:
    """Apply a sanitized partial update to a user."""

    user = repository.update_by_id(user_id, payload.model_dump(exclude_unset=True))
    if user is None:
        raise UserNotFoundError()
    return UserResponse.model_validate(user, from_attributes=True)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_user(user_id: UserIdDep, repository: RepositoryDep) -> Response:
    """Permanently delete a user."""

    if not repository.delete_by_id(user_id):
        raise UserNotFoundError()
    logger.info("Deleted user %s", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
