"""Complete user onboarding."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

from unicredits.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from unicredits.application.factories import RepositoryFactory
    from unicredits.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class CompleteOnboardingCommand:
    """Store the user's graduation credit goal and mark setup complete.

    Running it again overwrites the previous goal.
    """

    def __init__(self, user_repository: UserRepository, current_user: CurrentUser):
        self._user_repo = user_repository
        self._user_id: UUID = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CompleteOnboardingCommand:
        return cls(
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, graduation_total_credits: Any) -> User:
        user = await self._user_repo.find_by_id(self._user_id)
        if user is None:
            raise UserNotFoundError(self._user_id)

        user.complete_onboarding(graduation_total_credits)
        await self._user_repo.save(user)
        logger.info(
            "User %s completed onboarding (goal=%s)",
            self._user_id,
            user.graduation_total_credits,
        )
        return user
