"""API routers."""

from unicredits.presentation.api.routers.auth import router as auth_router
from unicredits.presentation.api.routers.categories import (
    router as categories_router,
)
from unicredits.presentation.api.routers.courses import router as courses_router
from unicredits.presentation.api.routers.onboarding import (
    router as onboarding_router,
)
from unicredits.presentation.api.routers.stats import router as stats_router

__all__ = [
    "auth_router",
    "categories_router",
    "courses_router",
    "onboarding_router",
    "stats_router",
]
