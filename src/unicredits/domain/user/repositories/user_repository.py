"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from unicredits.domain.user.aggregates import User
from unicredits.domain.user.value_objects import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Not user-scoped: registration and login look users up before anyone is
    authenticated.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Save or update a user.

        Raises
        ------
        EmailAlreadyRegisteredError
            If email is already in use by another user
        """
