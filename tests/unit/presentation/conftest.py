"""Pytest fixtures for API tests through FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from unicredits.infrastructure.persistence.sqlalchemy.init_db import create_tables
from unicredits.presentation.api.app import API_V1_PREFIX, create_app
from unicredits.presentation.api.dependencies import (
    get_db_session,
    get_email_service,
    get_password_service,
)
from unicredits_auth import PasswordHashingService
from unicredits_config.settings import Settings

TEST_PASSWORD = "secure_password_123"


class CapturingEmailSender:
    """Records verification codes instead of sending them."""

    def __init__(self):
        self.codes: dict[str, str] = {}

    def send_verification_code(self, to_email: str, code: str) -> None:
        self.codes[to_email] = code


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        postgres_password=SecretStr("test-password"),
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
async def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def email_sender() -> CapturingEmailSender:
    return CapturingEmailSender()


@pytest.fixture
def test_client(api_settings, test_db_engine, email_sender) -> TestClient:
    """Create a test client with an in-memory database."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_email_service] = lambda: email_sender
    app.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        rounds=4,
    )

    return TestClient(app)


@pytest.fixture
def register_user(test_client, email_sender, api_v1_prefix):
    """Register and verify a user, returning its bearer auth headers."""

    def _register(email: str = "student@stu.pku.edu.cn") -> dict:
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": email, "password": TEST_PASSWORD},
        )
        assert response.status_code == 200, response.text

        response = test_client.post(
            f"{api_v1_prefix}/auth/verify-email",
            json={"email": email, "code": email_sender.codes[email]},
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _register


@pytest.fixture
def auth_headers(register_user) -> dict:
    return register_user()
