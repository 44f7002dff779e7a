"""SQLAlchemy implementation of CourseRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from unicredits.domain.academics.entities import Course
from unicredits.domain.academics.repositories import CourseRepository
from unicredits.domain.academics.value_objects import (
    CREDIT_EARNING_STATUSES,
    CourseStatus,
)
from unicredits.domain.shared.time import ensure_tz_aware
from unicredits.infrastructure.persistence.sqlalchemy.models import CourseModel

if TYPE_CHECKING:
    from unicredits.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class CourseRepositorySQLAlchemy(CourseRepository):
    """SQLAlchemy implementation of the course repository."""

    def __init__(self, session: AsyncSession, current_user: CurrentUser):
        self._session = session
        self._user_id = current_user.user_id

    async def save(self, course: Course) -> None:
        model = await self._find_model_by_id(course.id)

        if model:
            logger.debug("Updating existing course: %s", course.name)
            self._update_model_from_domain(model, course)
        else:
            logger.debug("Creating new course: %s", course.name)
            self._session.add(self._create_model_from_domain(course))

        await self._session.flush()
        logger.info("Course saved: %s (ID: %s)", course.name, course.id)

    async def find_by_id(self, course_id: UUID) -> Optional[Course]:
        model = await self._find_model_by_id(course_id)
        return self._map_to_domain(model) if model else None

    async def find_all(
        self,
        category_id: Optional[UUID] = None,
        status: Optional[CourseStatus] = None,
    ) -> list[Course]:
        stmt = select(CourseModel).where(CourseModel.user_id == self._user_id)
        if category_id is not None:
            stmt = stmt.where(CourseModel.category_id == category_id)
        if status is not None:
            stmt = stmt.where(CourseModel.status == status.value)
        stmt = stmt.order_by(CourseModel.created_at.desc())

        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_credit_earning(self) -> list[Course]:
        stmt = (
            select(CourseModel)
            .where(
                CourseModel.user_id == self._user_id,
                CourseModel.status.in_([s.value for s in CREDIT_EARNING_STATUSES]),
            )
            .order_by(CourseModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def delete(self, course_id: UUID) -> bool:
        model = await self._find_model_by_id(course_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Course deleted: %s", course_id)
        return True

    async def _find_model_by_id(self, course_id: UUID) -> Optional[CourseModel]:
        stmt = select(CourseModel).where(
            CourseModel.id == course_id,
            CourseModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _create_model_from_domain(self, course: Course) -> CourseModel:
        return CourseModel(
            id=course.id,
            user_id=self._user_id,
            category_id=course.category_id,
            name=course.name,
            credits=course.credits,
            status=course.status.value,
            grade=course.grade,
            gpa_score=course.gpa_score,
            created_at=course.created_at,
            updated_at=course.updated_at,
        )

    def _update_model_from_domain(self, model: CourseModel, course: Course) -> None:
        model.category_id = course.category_id
        model.name = course.name
        model.credits = course.credits
        model.status = course.status.value
        model.grade = course.grade
        model.gpa_score = course.gpa_score
        model.updated_at = course.updated_at

    def _map_to_domain(self, model: CourseModel) -> Course:
        return Course.reconstitute(
            id=model.id,
            user_id=model.user_id,
            category_id=model.category_id,
            name=model.name,
            credits=model.credits,
            status=CourseStatus(model.status),
            grade=model.grade,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
