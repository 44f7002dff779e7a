"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from unicredits.infrastructure.persistence.sqlalchemy.init_db import create_tables
from unicredits.presentation.api.dependencies import get_engine
from unicredits.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from unicredits.presentation.api.routers import (
    auth_router,
    categories_router,
    courses_router,
    onboarding_router,
    stats_router,
)
from unicredits_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the configured level
    for our own packages and WARNING for noisy third-party libraries.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("unicredits").setLevel(log_level)
    logging.getLogger("unicredits_auth").setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration with institutional email verification.

**Flow:**
1. `POST /auth/register` sends a 6-digit code to the address
2. `POST /auth/verify-email` creates the account and returns a JWT
3. `POST /auth/login` returns a fresh JWT afterwards
""",
    },
    {
        "name": "Onboarding",
        "description": "Record the total credits needed to graduate.",
    },
    {
        "name": "Categories",
        "description": """Credit categories (e.g. major required, electives).

Names are unique per user. Deleting a category deletes its courses.
""",
    },
    {
        "name": "Courses",
        "description": """Courses and their completion state.

**Statuses:**
- `PENDING`: not finished, no grade
- `COMPLETED`: finished, optionally graded in [0, 100]
- `PF`: pass/fail, earns credits but never affects GPA
""",
    },
    {
        "name": "Stats",
        "description": "Earned and remaining credits with credit-weighted GPA.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting UniCredits API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down UniCredits API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(
        onboarding_router,
        prefix="/onboarding",
        tags=["Onboarding"],
    )
    v1_router.include_router(
        categories_router,
        prefix="/categories",
        tags=["Categories"],
    )
    v1_router.include_router(courses_router, prefix="/courses", tags=["Courses"])
    v1_router.include_router(stats_router, prefix="/stats", tags=["Stats"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description=(
            "Track **academic credits** per category and a "
            "**credit-weighted GPA** towards graduation."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint, unversioned for monitoring."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_V1_PREFIX}/auth",
                "onboarding": f"{API_V1_PREFIX}/onboarding",
                "categories": f"{API_V1_PREFIX}/categories",
                "courses": f"{API_V1_PREFIX}/courses",
                "stats": f"{API_V1_PREFIX}/stats",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
