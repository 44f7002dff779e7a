"""
Pytest fixtures for SQLAlchemy repository tests.

Each test gets its own in-memory SQLite database with the full schema.
"""

from datetime import datetime, timezone
from uuid import UUID

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from unicredits.application.ports.identity import CurrentUser
from unicredits.infrastructure.persistence.sqlalchemy.init_db import create_tables
from unicredits.infrastructure.persistence.sqlalchemy.models import UserModel

# Fixed UUIDs for testing - ensures deterministic behavior
TEST_USER_ID = UUID("12345678-1234-5678-1234-567812345678")
TEST_USER_EMAIL = "student@stu.pku.edu.cn"

# Secondary test user for isolation tests
TEST_USER_ID_2 = UUID("00000000-0000-0000-0000-000000000001")
TEST_USER_EMAIL_2 = "other@stu.pku.edu.cn"


def _user_model(user_id: UUID, email: str) -> UserModel:
    now = datetime.now(tz=timezone.utc)
    return UserModel(
        id=user_id,
        email=email,
        has_completed_setup=False,
        graduation_total_credits=None,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
async def async_engine():
    # StaticPool keeps one connection so the in-memory database survives
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def async_session(session_maker):
    """A session with both test users already stored."""
    async with session_maker() as session:
        session.add(_user_model(TEST_USER_ID, TEST_USER_EMAIL))
        session.add(_user_model(TEST_USER_ID_2, TEST_USER_EMAIL_2))
        await session.commit()
        yield session


@pytest.fixture
def current_user() -> CurrentUser:
    return CurrentUser(user_id=TEST_USER_ID, email=TEST_USER_EMAIL)


@pytest.fixture
def other_user() -> CurrentUser:
    return CurrentUser(user_id=TEST_USER_ID_2, email=TEST_USER_EMAIL_2)
