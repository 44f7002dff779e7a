"""SQLAlchemy implementation of CourseCategoryRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from unicredits.domain.academics.entities import CourseCategory
from unicredits.domain.academics.exceptions import CategoryAlreadyExistsError
from unicredits.domain.academics.repositories import CourseCategoryRepository
from unicredits.domain.shared.time import ensure_tz_aware
from unicredits.infrastructure.persistence.sqlalchemy.models import (
    CourseCategoryModel,
    CourseModel,
)
from unicredits.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

if TYPE_CHECKING:
    from unicredits.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class CourseCategoryRepositorySQLAlchemy(CourseCategoryRepository):
    """SQLAlchemy implementation of the course category repository."""

    def __init__(self, session: AsyncSession, current_user: CurrentUser):
        self._session = session
        self._user_id = current_user.user_id

    async def save(self, category: CourseCategory) -> None:
        model = await self._find_model_by_id(category.id)

        if model:
            logger.debug("Updating existing category: %s", category.name)
            self._update_model_from_domain(model, category)
        else:
            logger.debug("Creating new category: %s", category.name)
            model = self._create_model_from_domain(category)
            self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Keep session usable after a failed flush
            await self._session.rollback()

            if is_unique_violation(
                exc,
                "course_categories",
                ("user_id", "name"),
                "uq_course_categories_user_name",
            ):
                raise CategoryAlreadyExistsError(category.name) from exc

            error_msg = f"Failed to save category due to database constraint: {exc.orig}"
            raise ValueError(error_msg) from exc

        logger.info("Category saved: %s (ID: %s)", category.name, category.id)

    async def find_by_id(self, category_id: UUID) -> Optional[CourseCategory]:
        model = await self._find_model_by_id(category_id)
        return self._map_to_domain(model) if model else None

    async def find_by_name(self, name: str) -> Optional[CourseCategory]:
        stmt = select(CourseCategoryModel).where(
            CourseCategoryModel.user_id == self._user_id,
            CourseCategoryModel.name == name,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_all(self) -> list[CourseCategory]:
        stmt = (
            select(CourseCategoryModel)
            .where(CourseCategoryModel.user_id == self._user_id)
            .order_by(
                # NULL order_index sorts last on every backend
                CourseCategoryModel.order_index.is_(None),
                CourseCategoryModel.order_index,
                CourseCategoryModel.name,
            )
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def delete_with_courses(self, category_id: UUID) -> bool:
        model = await self._find_model_by_id(category_id)
        if model is None:
            return False

        # Explicit so the cascade does not depend on SQLite's foreign_keys pragma
        result = await self._session.execute(
            delete(CourseModel).where(
                CourseModel.user_id == self._user_id,
                CourseModel.category_id == category_id,
            ),
        )
        await self._session.delete(model)
        await self._session.flush()
        logger.info(
            "Category deleted: %s (%d courses removed)",
            category_id,
            result.rowcount or 0,
        )
        return True

    async def _find_model_by_id(
        self,
        category_id: UUID,
    ) -> Optional[CourseCategoryModel]:
        stmt = select(CourseCategoryModel).where(
            CourseCategoryModel.id == category_id,
            CourseCategoryModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _create_model_from_domain(
        self,
        category: CourseCategory,
    ) -> CourseCategoryModel:
        return CourseCategoryModel(
            id=category.id,
            user_id=self._user_id,
            name=category.name,
            required_credits=category.required_credits,
            order_index=category.order_index,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )

    def _update_model_from_domain(
        self,
        model: CourseCategoryModel,
        category: CourseCategory,
    ) -> None:
        model.name = category.name
        model.required_credits = category.required_credits
        model.order_index = category.order_index
        model.updated_at = category.updated_at

    def _map_to_domain(self, model: CourseCategoryModel) -> CourseCategory:
        return CourseCategory.reconstitute(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            required_credits=model.required_credits,
            order_index=model.order_index,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
