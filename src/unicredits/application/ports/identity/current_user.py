"""CurrentUser - the application's view of the authenticated user."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from unicredits.domain.user import User


@dataclass(frozen=True)
class CurrentUser:
    """Immutable representation of the current authenticated user.

    Created once per request and handed to the repository factory, whose
    repositories filter every query by ``user_id``.
    """

    user_id: UUID
    email: str

    @classmethod
    def from_user(cls, user: User) -> CurrentUser:
        return cls(user_id=user.id, email=user.email)

    def __str__(self) -> str:
        return f"CurrentUser({self.email})"

    def __repr__(self) -> str:
        return f"CurrentUser(user_id={self.user_id}, email={self.email!r})"
