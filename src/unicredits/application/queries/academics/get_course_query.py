"""Fetch a single course."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from unicredits.domain.academics.entities import Course
from unicredits.domain.academics.exceptions import CourseNotFoundError
from unicredits.domain.academics.repositories import CourseRepository

if TYPE_CHECKING:
    from unicredits.application.factories import RepositoryFactory


class GetCourseQuery:
    def __init__(self, course_repository: CourseRepository):
        self._course_repo = course_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetCourseQuery:
        return cls(course_repository=factory.course_repository())

    async def execute(self, course_id: UUID) -> Course:
        course = await self._course_repo.find_by_id(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        return course
