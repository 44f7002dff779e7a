"""Decoded token data."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

ACCESS_TOKEN_TYPE = "access"


@dataclass(frozen=True)
class TokenPayload:
    """Claims of a verified access token.

    ``user_id`` comes from ``sub``; ``exp`` is timezone-aware UTC.
    """

    user_id: UUID
    email: str
    exp: datetime
    token_type: str = ACCESS_TOKEN_TYPE

    def is_expired(self) -> bool:
        return datetime.now(tz=timezone.utc) >= self.exp

    def is_access_token(self) -> bool:
        return self.token_type == ACCESS_TOKEN_TYPE
