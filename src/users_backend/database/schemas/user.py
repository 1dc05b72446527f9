"""User database schema."""

from uuid import UUID, uuid4

from sqlalchemy import Float, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from users_backend.database.base import BaseSchema


class UserSchema(BaseSchema):
    """SQLAlchemy model for stored user records."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age: Mapped[float | None] = mapped_column(Float, nullable=True, index=True)
