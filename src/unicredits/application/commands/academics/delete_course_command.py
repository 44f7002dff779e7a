"""Delete courses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from unicredits.domain.academics.exceptions import CourseNotFoundError
from unicredits.domain.academics.repositories import CourseRepository

if TYPE_CHECKING:
    from unicredits.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteCourseCommand:
    def __init__(self, course_repository: CourseRepository):
        self._course_repo = course_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCourseCommand:
        return cls(course_repository=factory.course_repository())

    async def execute(self, course_id: UUID) -> None:
        if not await self._course_repo.delete(course_id):
            raise CourseNotFoundError(course_id)
        logger.info("Deleted course %s", course_id)
