"""SQLAlchemy model for pending email verifications."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from unicredits.domain.shared.time import utc_now
from unicredits.infrastructure.persistence.sqlalchemy.models.base import Base


class PendingVerificationModel(Base):
    """Registration awaiting its emailed code. Keyed by email (one per email)."""

    __tablename__ = "pending_verifications"

    email: Mapped[str] = mapped_column(String(255), primary_key=True)
    code: Mapped[str] = mapped_column(String(6), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    def __repr__(self) -> str:
        return (
            f"<PendingVerificationModel(email={self.email}, "
            f"expires_at={self.expires_at})>"
        )
