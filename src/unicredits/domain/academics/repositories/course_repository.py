"""Course repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from unicredits.domain.academics.entities import Course
from unicredits.domain.academics.value_objects import CourseStatus


class CourseRepository(ABC):
    """
    Repository interface for Course entities.

    Note: Implementations are scoped to a specific user. All queries
    automatically filter by the current user's id.
    """

    @abstractmethod
    async def save(self, course: Course) -> None:
        """Insert or update a course for the current user."""

    @abstractmethod
    async def find_by_id(self, course_id: UUID) -> Optional[Course]:
        """Find a course by ID."""

    @abstractmethod
    async def find_all(
        self,
        category_id: Optional[UUID] = None,
        status: Optional[CourseStatus] = None,
    ) -> List[Course]:
        """List courses, newest first, optionally filtered."""

    @abstractmethod
    async def find_credit_earning(self) -> List[Course]:
        """List COMPLETED and PF courses, the ones that count towards credits."""

    @abstractmethod
    async def delete(self, course_id: UUID) -> bool:
        """Delete a course. Returns False if it did not exist."""
