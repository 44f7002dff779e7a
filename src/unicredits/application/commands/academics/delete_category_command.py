"""Delete course categories together with their courses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from unicredits.domain.academics.exceptions import CategoryNotFoundError
from unicredits.domain.academics.repositories import CourseCategoryRepository

if TYPE_CHECKING:
    from unicredits.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteCategoryCommand:
    """Delete a category and every course filed under it."""

    def __init__(self, category_repository: CourseCategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_id: UUID) -> None:
        deleted = await self._category_repo.delete_with_courses(category_id)
        if not deleted:
            raise CategoryNotFoundError(category_id)
        logger.info("Deleted category %s and its courses", category_id)
