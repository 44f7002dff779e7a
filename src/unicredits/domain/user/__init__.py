"""User domain layer exports."""

from unicredits.domain.user.aggregates import User
from unicredits.domain.user.entities import PendingVerification
from unicredits.domain.user.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidEmailDomainError,
    InvalidEmailError,
    InvalidVerificationCodeError,
    UserNotFoundError,
    VerificationEmailError,
    VerificationExpiredError,
    VerificationNotFoundError,
)
from unicredits.domain.user.repositories import (
    PendingVerificationRepository,
    UserCredentialData,
    UserCredentialRepository,
    UserRepository,
)
from unicredits.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyRegisteredError",
    "InvalidEmailDomainError",
    "InvalidEmailError",
    "InvalidVerificationCodeError",
    "PendingVerification",
    "PendingVerificationRepository",
    "User",
    "UserCredentialData",
    "UserCredentialRepository",
    "UserNotFoundError",
    "UserRepository",
    "VerificationEmailError",
    "VerificationExpiredError",
    "VerificationNotFoundError",
]
