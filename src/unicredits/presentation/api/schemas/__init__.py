"""Pydantic schemas for API request/response models."""

from unicredits.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse,
    VerifyEmailRequest,
)
from unicredits.presentation.api.schemas.categories import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)
from unicredits.presentation.api.schemas.courses import (
    CourseCreateRequest,
    CourseResponse,
    CourseUpdateRequest,
)
from unicredits.presentation.api.schemas.onboarding import (
    CompleteOnboardingRequest,
)
from unicredits.presentation.api.schemas.stats import (
    CategorySummaryResponse,
    CreditSummaryResponse,
)

__all__ = [
    # Auth
    "AuthResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "UserResponse",
    "VerifyEmailRequest",
    # Onboarding
    "CompleteOnboardingRequest",
    # Categories
    "CategoryCreateRequest",
    "CategoryResponse",
    "CategoryUpdateRequest",
    # Courses
    "CourseCreateRequest",
    "CourseResponse",
    "CourseUpdateRequest",
    # Stats
    "CategorySummaryResponse",
    "CreditSummaryResponse",
]
