from unicredits.domain.user.repositories.pending_verification_repository import (
    PendingVerificationRepository,
)
from unicredits.domain.user.repositories.user_credential_repository import (
    UserCredentialData,
    UserCredentialRepository,
)
from unicredits.domain.user.repositories.user_repository import UserRepository

__all__ = [
    "PendingVerificationRepository",
    "UserCredentialData",
    "UserCredentialRepository",
    "UserRepository",
]
