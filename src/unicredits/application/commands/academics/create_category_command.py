"""Create course categories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID

from unicredits.domain.academics.entities import CourseCategory
from unicredits.domain.academics.exceptions import CategoryAlreadyExistsError
from unicredits.domain.academics.repositories import CourseCategoryRepository

if TYPE_CHECKING:
    from unicredits.application.factories import RepositoryFactory
    from unicredits.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class CreateCategoryCommand:
    """Validate and create a new category for the current user."""

    def __init__(
        self,
        category_repository: CourseCategoryRepository,
        current_user: CurrentUser,
    ):
        self._category_repo = category_repository
        self._user_id: UUID = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCategoryCommand:
        return cls(
            category_repository=factory.category_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        name: Any,
        required_credits: Any,
        order_index: Optional[Any] = None,
    ) -> CourseCategory:
        # Entity construction validates every field before anything is stored
        category = CourseCategory(
            user_id=self._user_id,
            name=name,
            required_credits=required_credits,
            order_index=order_index,
        )

        # Repository is user-scoped; the unique constraint backs this check
        if await self._category_repo.find_by_name(category.name):
            raise CategoryAlreadyExistsError(category.name)

        await self._category_repo.save(category)
        logger.info("Created category %s (%s)", category.name, category.id)
        return category
