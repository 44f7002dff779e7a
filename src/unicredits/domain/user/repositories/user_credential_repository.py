"""Abstract repository for password credentials."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserCredentialData:
    """Immutable credential data. The hash never leaves the identity flow."""

    user_id: UUID
    password_hash: str


class UserCredentialRepository(ABC):
    @abstractmethod
    async def save(self, user_id: UUID, password_hash: str) -> UserCredentialData:
        """Create or replace the password hash for a user."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        """Find credentials by user ID."""
