"""List course categories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from unicredits.domain.academics.entities import CourseCategory
from unicredits.domain.academics.repositories import CourseCategoryRepository

if TYPE_CHECKING:
    from unicredits.application.factories import RepositoryFactory


class ListCategoriesQuery:
    """List the current user's categories in display order."""

    def __init__(self, category_repository: CourseCategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCategoriesQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self) -> list[CourseCategory]:
        return await self._category_repo.find_all()
