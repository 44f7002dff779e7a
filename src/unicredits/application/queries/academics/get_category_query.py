"""Fetch a single course category."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from unicredits.domain.academics.entities import CourseCategory
from unicredits.domain.academics.exceptions import CategoryNotFoundError
from unicredits.domain.academics.repositories import CourseCategoryRepository

if TYPE_CHECKING:
    from unicredits.application.factories import RepositoryFactory


class GetCategoryQuery:
    def __init__(self, category_repository: CourseCategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetCategoryQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_id: UUID) -> CourseCategory:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category
