"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from unicredits.domain.academics.repositories import (
    CourseCategoryRepository,
    CourseRepository,
)
from unicredits.domain.user.repositories import UserRepository

if TYPE_CHECKING:
    from unicredits.application.ports.identity import CurrentUser


class RepositoryFactory(Protocol):
    """Protocol for creating user-scoped repositories."""

    @property
    def current_user(self) -> CurrentUser:
        """Get the current user for repository scoping."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        Typed as `Any` so the application layer stays independent of the
        database implementation. The presentation layer uses it for
        commit/rollback.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def category_repository(self) -> CourseCategoryRepository:
        """Get course category repository."""
        ...

    def course_repository(self) -> CourseRepository:
        """Get course repository."""
        ...
