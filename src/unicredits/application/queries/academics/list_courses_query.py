"""List courses with optional filters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID

from unicredits.domain.academics.entities import Course
from unicredits.domain.academics.repositories import CourseRepository
from unicredits.domain.academics.value_objects import CourseStatus

if TYPE_CHECKING:
    from unicredits.application.factories import RepositoryFactory


class ListCoursesQuery:
    """List the current user's courses, newest first."""

    def __init__(self, course_repository: CourseRepository):
        self._course_repo = course_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCoursesQuery:
        return cls(course_repository=factory.course_repository())

    async def execute(
        self,
        category_id: Optional[UUID] = None,
        status: Optional[Any] = None,
    ) -> list[Course]:
        """
        List courses.

        Parameters
        ----------
        category_id
            Only courses in this category
        status
            Only courses with this status; unknown values raise
            InvalidCourseStatusError
        """
        status_filter = CourseStatus.parse(status) if status is not None else None
        return await self._course_repo.find_all(
            category_id=category_id,
            status=status_filter,
        )
