"""Pending email verification record."""

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta

from unicredits.domain.shared.time import ensure_tz_aware, utc_now

CODE_LENGTH = 6
DEFAULT_EXPIRY_MINUTES = 15


def generate_verification_code() -> str:
    """Return a random six digit numeric code (100000-999999)."""
    return str(secrets.randbelow(900_000) + 100_000)


@dataclass(frozen=True)
class PendingVerification:
    """Immutable registration attempt awaiting its emailed code.

    There is at most one per email; starting registration again replaces it.
    """

    email: str
    code: str
    password_hash: str
    expires_at: datetime
    created_at: datetime

    @classmethod
    def issue(
        cls,
        email: str,
        password_hash: str,
        expiry_minutes: int = DEFAULT_EXPIRY_MINUTES,
    ) -> "PendingVerification":
        now = utc_now()
        return cls(
            email=email,
            code=generate_verification_code(),
            password_hash=password_hash,
            expires_at=now + timedelta(minutes=expiry_minutes),
            created_at=now,
        )

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the code has expired."""
        return (now or utc_now()) > ensure_tz_aware(self.expires_at)

    def matches(self, code: str) -> bool:
        return secrets.compare_digest(
            self.code.encode("utf-8"),
            code.strip().encode("utf-8"),
        )
