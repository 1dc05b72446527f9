"""Pydantic models for user endpoints."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

Age = int | float


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    username: str | None = None
    email: str | None = None
    age: Age | None = None

    @field_validator("age")
    @classmethod
    def integral_age_as_int(cls, value: Age | None) -> Age | None:
        # The store keeps ages as floats; whole numbers go back out as ints.
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class UserCreateRequest(BaseModel):
    """Payload for creating a user; every field is optional."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    username: str | None = None
    email: str | None = None
    age: Age | None = None


class UserUpdateRequest(UserCreateRequest):
    """Partial payload for updating a user.

    Only the fields present in the request are applied; use
    ``model_dump(exclude_unset=True)`` to obtain the patch.
    """
