"""Create courses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID

from unicredits.domain.academics.entities import Course
from unicredits.domain.academics.exceptions import CategoryNotFoundError
from unicredits.domain.academics.repositories import (
    CourseCategoryRepository,
    CourseRepository,
)

if TYPE_CHECKING:
    from unicredits.application.factories import RepositoryFactory
    from unicredits.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class CreateCourseCommand:
    """Validate and create a course in one of the current user's categories."""

    def __init__(
        self,
        course_repository: CourseRepository,
        category_repository: CourseCategoryRepository,
        current_user: CurrentUser,
    ):
        self._course_repo = course_repository
        self._category_repo = category_repository
        self._user_id: UUID = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCourseCommand:
        return cls(
            course_repository=factory.course_repository(),
            category_repository=factory.category_repository(),
            current_user=factory.current_user,
        )

    async def execute(  # noqa: PLR0913
        self,
        name: Any,
        credits: Any,
        category_id: UUID,
        status: Any,
        grade: Optional[Any] = None,
    ) -> Course:
        # Validates name, credits, status, grade and their coupling
        course = Course(
            user_id=self._user_id,
            category_id=category_id,
            name=name,
            credits=credits,
            status=status,
            grade=grade,
        )

        if await self._category_repo.find_by_id(category_id) is None:
            raise CategoryNotFoundError(category_id)

        await self._course_repo.save(course)
        logger.info(
            "Created course %s (%s) in category %s",
            course.name,
            course.status.value,
            category_id,
        )
        return course
