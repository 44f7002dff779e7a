"""SQLAlchemy repository factory for creating user-scoped repositories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from unicredits.infrastructure.persistence.sqlalchemy.repositories.academics import (
    CourseCategoryRepositorySQLAlchemy,
    CourseRepositorySQLAlchemy,
)
from unicredits.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from unicredits.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession, current_user: CurrentUser):
        self._session = session
        self._current_user = current_user

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._category_repo: CourseCategoryRepositorySQLAlchemy | None = None
        self._course_repo: CourseRepositorySQLAlchemy | None = None

    @property
    def current_user(self) -> CurrentUser:
        return self._current_user

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def category_repository(self) -> CourseCategoryRepositorySQLAlchemy:
        if self._category_repo is None:
            self._category_repo = CourseCategoryRepositorySQLAlchemy(
                self._session,
                self._current_user,
            )
        return self._category_repo

    def course_repository(self) -> CourseRepositorySQLAlchemy:
        if self._course_repo is None:
            self._course_repo = CourseRepositorySQLAlchemy(
                self._session,
                self._current_user,
            )
        return self._course_repo
