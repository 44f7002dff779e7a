"""SQLAlchemy model for User aggregate."""

from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, Float, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from unicredits.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting User aggregates.

    The password hash lives in ``user_credentials``, never here.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    # Onboarding
    has_completed_setup: Mapped[bool] = mapped_column(Boolean, default=False)
    graduation_total_credits: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
