"""Course category repository interface.

Implementations are user-scoped: every query filters by the current user's
id, so a category owned by someone else looks exactly like a missing one.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from unicredits.domain.academics.entities import CourseCategory


class CourseCategoryRepository(ABC):
    """Repository interface for CourseCategory entities."""

    @abstractmethod
    async def save(self, category: CourseCategory) -> None:
        """
        Insert or update a category for the current user.

        Raises
        ------
        CategoryAlreadyExistsError
            If the user already has another category with the same name
        """

    @abstractmethod
    async def find_by_id(self, category_id: UUID) -> Optional[CourseCategory]:
        """Find a category by ID."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[CourseCategory]:
        """Find a category by its exact (trimmed) name."""

    @abstractmethod
    async def find_all(self) -> List[CourseCategory]:
        """
        List all categories.

        Ordered by order_index ascending (categories without one last),
        then by name.
        """

    @abstractmethod
    async def delete_with_courses(self, category_id: UUID) -> bool:
        """
        Delete a category together with every course filed under it.

        Both deletions happen in the same transaction.

        Returns
        -------
        True if the category existed and was deleted, False otherwise
        """
