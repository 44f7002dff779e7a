"""SQLAlchemy model for course categories."""

from typing import Optional
from uuid import UUID

from sqlalchemy import Float, ForeignKey, Index, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from unicredits.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class CourseCategoryModel(Base, TimestampMixin):
    """Database model for course categories."""

    __tablename__ = "course_categories"

    __table_args__ = (
        Index("ix_course_categories_user_id", "user_id"),
        # Closes the race between two concurrent creates with the same name
        UniqueConstraint("user_id", "name", name="uq_course_categories_user_name"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    required_credits: Mapped[float] = mapped_column(Float, nullable=False)
    order_index: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<CourseCategoryModel(id={self.id}, name={self.name})>"
