"""In-memory repositories for command and query tests.

All repositories share one ``InMemoryStore`` so tests can observe ownership
isolation and cascades the same way the SQLAlchemy implementations behave.
Entities are copied on the way in and out, like rows in a database.
"""

import copy
from dataclasses import dataclass, field
from typing import Optional
from unittest.mock import AsyncMock
from uuid import UUID

import pytest

from unicredits.application.ports.identity import CurrentUser
from unicredits.domain.academics import (
    CategoryAlreadyExistsError,
    Course,
    CourseCategory,
    CourseCategoryRepository,
    CourseRepository,
    CourseStatus,
)
from unicredits.domain.user import User, UserRepository

TEST_USER_ID = UUID("12345678-1234-5678-1234-567812345678")
TEST_USER_EMAIL = "student@stu.pku.edu.cn"

OTHER_USER_ID = UUID("00000000-0000-0000-0000-000000000001")
OTHER_USER_EMAIL = "other@stu.pku.edu.cn"


@dataclass
class InMemoryStore:
    users: dict[UUID, User] = field(default_factory=dict)
    categories: dict[UUID, CourseCategory] = field(default_factory=dict)
    courses: dict[UUID, Course] = field(default_factory=dict)
    saves: int = 0


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        user = self._store.users.get(user_id)
        return copy.copy(user) if user else None

    async def find_by_email(self, email) -> Optional[User]:
        value = getattr(email, "value", email)
        for user in self._store.users.values():
            if user.email == value:
                return copy.copy(user)
        return None

    async def exists_by_email(self, email) -> bool:
        return await self.find_by_email(email) is not None

    async def save(self, user: User) -> None:
        self._store.users[user.id] = copy.copy(user)


class InMemoryCategoryRepository(CourseCategoryRepository):
    def __init__(self, store: InMemoryStore, current_user: CurrentUser):
        self._store = store
        self._user_id = current_user.user_id

    def _owned(self) -> list[CourseCategory]:
        return [c for c in self._store.categories.values() if c.user_id == self._user_id]

    async def save(self, category: CourseCategory) -> None:
        # Mirrors the (user_id, name) unique constraint
        for other in self._owned():
            if other.name == category.name and other.id != category.id:
                raise CategoryAlreadyExistsError(category.name)
        self._store.categories[category.id] = copy.copy(category)
        self._store.saves += 1

    async def find_by_id(self, category_id: UUID) -> Optional[CourseCategory]:
        for category in self._owned():
            if category.id == category_id:
                return copy.copy(category)
        return None

    async def find_by_name(self, name: str) -> Optional[CourseCategory]:
        for category in self._owned():
            if category.name == name:
                return copy.copy(category)
        return None

    async def find_all(self) -> list[CourseCategory]:
        ordered = sorted(
            self._owned(),
            key=lambda c: (c.order_index is None, c.order_index or 0.0, c.name),
        )
        return [copy.copy(c) for c in ordered]

    async def delete_with_courses(self, category_id: UUID) -> bool:
        if await self.find_by_id(category_id) is None:
            return False
        for course_id, course in list(self._store.courses.items()):
            if course.category_id == category_id:
                del self._store.courses[course_id]
        del self._store.categories[category_id]
        return True


class InMemoryCourseRepository(CourseRepository):
    def __init__(self, store: InMemoryStore, current_user: CurrentUser):
        self._store = store
        self._user_id = current_user.user_id

    def _owned(self) -> list[Course]:
        return [c for c in self._store.courses.values() if c.user_id == self._user_id]

    async def save(self, course: Course) -> None:
        self._store.courses[course.id] = copy.copy(course)
        self._store.saves += 1

    async def find_by_id(self, course_id: UUID) -> Optional[Course]:
        for course in self._owned():
            if course.id == course_id:
                return copy.copy(course)
        return None

    async def find_all(
        self,
        category_id: Optional[UUID] = None,
        status: Optional[CourseStatus] = None,
    ) -> list[Course]:
        courses = [
            c
            for c in self._owned()
            if (category_id is None or c.category_id == category_id)
            and (status is None or c.status == status)
        ]
        courses.sort(key=lambda c: c.created_at, reverse=True)
        return [copy.copy(c) for c in courses]

    async def find_credit_earning(self) -> list[Course]:
        return [c for c in await self.find_all() if c.status.earns_credits]

    async def delete(self, course_id: UUID) -> bool:
        if await self.find_by_id(course_id) is None:
            return False
        del self._store.courses[course_id]
        return True


class InMemoryRepositoryFactory:
    """RepositoryFactory over an InMemoryStore for one user."""

    def __init__(self, store: InMemoryStore, current_user: CurrentUser):
        self._store = store
        self._current_user = current_user
        self.session = AsyncMock()

    @property
    def current_user(self) -> CurrentUser:
        return self._current_user

    def user_repository(self) -> InMemoryUserRepository:
        return InMemoryUserRepository(self._store)

    def category_repository(self) -> InMemoryCategoryRepository:
        return InMemoryCategoryRepository(self._store, self._current_user)

    def course_repository(self) -> InMemoryCourseRepository:
        return InMemoryCourseRepository(self._store, self._current_user)


@pytest.fixture
def store() -> InMemoryStore:
    store = InMemoryStore()
    for user_id, email in (
        (TEST_USER_ID, TEST_USER_EMAIL),
        (OTHER_USER_ID, OTHER_USER_EMAIL),
    ):
        user = User(email=email, id=user_id)
        store.users[user.id] = user
    return store


@pytest.fixture
def current_user() -> CurrentUser:
    return CurrentUser(user_id=TEST_USER_ID, email=TEST_USER_EMAIL)


@pytest.fixture
def other_user() -> CurrentUser:
    return CurrentUser(user_id=OTHER_USER_ID, email=OTHER_USER_EMAIL)


@pytest.fixture
def factory(store, current_user) -> InMemoryRepositoryFactory:
    return InMemoryRepositoryFactory(store, current_user)


@pytest.fixture
def other_factory(store, other_user) -> InMemoryRepositoryFactory:
    return InMemoryRepositoryFactory(store, other_user)
