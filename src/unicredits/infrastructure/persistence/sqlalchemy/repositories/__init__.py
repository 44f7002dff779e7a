"""SQLAlchemy repository implementations."""

from unicredits.infrastructure.persistence.sqlalchemy.repositories.academics import (
    CourseCategoryRepositorySQLAlchemy,
    CourseRepositorySQLAlchemy,
)
from unicredits.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from unicredits.infrastructure.persistence.sqlalchemy.repositories.user import (
    PendingVerificationRepositorySQLAlchemy,
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "CourseCategoryRepositorySQLAlchemy",
    "CourseRepositorySQLAlchemy",
    "PendingVerificationRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserCredentialRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
