from unicredits.infrastructure.persistence.sqlalchemy.repositories.user.pending_verification_repository import (  # NOQA: E501
    PendingVerificationRepositorySQLAlchemy,
)
from unicredits.infrastructure.persistence.sqlalchemy.repositories.user.user_credential_repository import (  # NOQA: E501
    UserCredentialRepositorySQLAlchemy,
)
from unicredits.infrastructure.persistence.sqlalchemy.repositories.user.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "PendingVerificationRepositorySQLAlchemy",
    "UserCredentialRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
