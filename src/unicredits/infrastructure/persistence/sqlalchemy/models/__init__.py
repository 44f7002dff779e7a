"""SQLAlchemy models for persistence layer."""

from unicredits.infrastructure.persistence.sqlalchemy.models.base import Base
from unicredits.infrastructure.persistence.sqlalchemy.models.course_category_model import (  # NOQA: E501
    CourseCategoryModel,
)
from unicredits.infrastructure.persistence.sqlalchemy.models.course_model import (
    CourseModel,
)
from unicredits.infrastructure.persistence.sqlalchemy.models.pending_verification_model import (  # NOQA: E501
    PendingVerificationModel,
)
from unicredits.infrastructure.persistence.sqlalchemy.models.user_credential_model import (  # NOQA: E501
    UserCredentialModel,
)
from unicredits.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "CourseCategoryModel",
    "CourseModel",
    "PendingVerificationModel",
    "UserCredentialModel",
    "UserModel",
]
