"""Update course categories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

from unicredits.domain.academics.entities import CourseCategory
from unicredits.domain.academics.exceptions import (
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
)
from unicredits.domain.academics.repositories import CourseCategoryRepository
from unicredits.domain.academics.validation import normalize_name
from unicredits.domain.shared.unset import UNSET

if TYPE_CHECKING:
    from unicredits.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateCategoryCommand:
    """Partially update a category.

    Fields left as ``UNSET`` keep their stored value; ``order_index=None``
    clears the display position. An update that changes nothing returns the
    stored category without writing.
    """

    def __init__(self, category_repository: CourseCategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(
        self,
        category_id: UUID,
        name: Any = UNSET,
        required_credits: Any = UNSET,
        order_index: Any = UNSET,
    ) -> CourseCategory:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        if name is not UNSET:
            await self._ensure_name_available(category, normalize_name(name))

        changed = category.update(
            name=name,
            required_credits=required_credits,
            order_index=order_index,
        )
        if not changed:
            logger.debug("Category %s unchanged, skipping save", category_id)
            return category

        await self._category_repo.save(category)
        logger.info("Updated category %s", category_id)
        return category

    async def _ensure_name_available(
        self,
        category: CourseCategory,
        name: str,
    ) -> None:
        if name == category.name:
            return
        existing = await self._category_repo.find_by_name(name)
        if existing is not None and existing.id != category.id:
            raise CategoryAlreadyExistsError(name)
