"""Update courses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

from unicredits.domain.academics.entities import Course
from unicredits.domain.academics.exceptions import (
    CategoryNotFoundError,
    CourseNotFoundError,
)
from unicredits.domain.academics.repositories import (
    CourseCategoryRepository,
    CourseRepository,
)
from unicredits.domain.shared.exceptions import ValidationError
from unicredits.domain.shared.unset import UNSET

if TYPE_CHECKING:
    from unicredits.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateCourseCommand:
    """Partially update a course.

    Status and grade are resolved together into the pair the course would
    end up with, and that pair is validated once (see
    ``Course.resolve_grading``). The GPA score is always derived from the
    resulting grade. An update that changes nothing returns the stored course
    without writing.
    """

    def __init__(
        self,
        course_repository: CourseRepository,
        category_repository: CourseCategoryRepository,
    ):
        self._course_repo = course_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCourseCommand:
        return cls(
            course_repository=factory.course_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(  # noqa: PLR0913
        self,
        course_id: UUID,
        name: Any = UNSET,
        credits: Any = UNSET,
        category_id: Any = UNSET,
        status: Any = UNSET,
        grade: Any = UNSET,
    ) -> Course:
        # A course always belongs to a category
        if category_id is None:
            raise ValidationError(
                "category_id cannot be null",
                details={"field": "category_id"},
            )

        course = await self._course_repo.find_by_id(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)

        # Validate the grading pair before touching the store
        course.resolve_grading(status=status, grade=grade)

        if category_id is not UNSET and category_id != course.category_id:
            if await self._category_repo.find_by_id(category_id) is None:
                raise CategoryNotFoundError(category_id)

        changed = course.update(
            name=name,
            credits=credits,
            category_id=category_id,
            status=status,
            grade=grade,
        )
        if not changed:
            logger.debug("Course %s unchanged, skipping save", course_id)
            return course

        await self._course_repo.save(course)
        logger.info(
            "Updated course %s (status=%s, gpa_score=%s)",
            course_id,
            course.status.value,
            course.gpa_score,
        )
        return course
