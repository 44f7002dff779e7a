"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/
    │   ├── domain/            # Entities, value objects, GPA scoring
    │   ├── application/       # Commands, queries and services on in-memory fakes
    │   ├── unicredits_auth/   # Password hashing and JWT
    │   ├── infrastructure/    # SQLAlchemy repositories on in-memory SQLite
    │   └── presentation/      # FastAPI routes through TestClient
    └── ...

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
    RUN_ALL_TESTS=1      Run all tests

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os

# The API module builds its app at import time, which reads settings
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-unit-tests-only")
os.environ.setdefault("POSTGRES_PASSWORD", "test-password")
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SMTP_ENABLED", "false")

import pytest  # noqa: E402

from unicredits_config import clear_settings_cache  # noqa: E402


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    if config.getoption("--run-all") or _env_flag("RUN_ALL_TESTS"):
        return

    if config.getoption("--run-integration") or _env_flag("RUN_INTEGRATION"):
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        if "integration" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
