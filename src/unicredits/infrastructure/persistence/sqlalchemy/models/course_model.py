"""SQLAlchemy model for courses."""

from typing import Optional
from uuid import UUID

from sqlalchemy import Float, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from unicredits.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class CourseModel(Base, TimestampMixin):
    """Database model for courses.

    ``gpa_score`` is a denormalized copy of the score derived from ``grade``;
    it is rewritten on every save.
    """

    __tablename__ = "courses"

    __table_args__ = (
        Index("ix_courses_user_id", "user_id"),
        Index("ix_courses_user_status", "user_id", "status"),
        Index("ix_courses_category_id", "category_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    category_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("course_categories.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    credits: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    grade: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    gpa_score: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<CourseModel(id={self.id}, name={self.name}, status={self.status})>"
