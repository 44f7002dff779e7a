"""User domain exceptions.

Errors raised while registering, verifying and onboarding users.
"""

from uuid import UUID

from unicredits.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when an email address is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.VALIDATION_ERROR)


class InvalidEmailDomainError(ValidationError):
    """Raised when an email is not from an allowed institutional domain."""

    def __init__(self, email: str, allowed_domains: list[str]) -> None:
        super().__init__(
            message=(
                "Registration requires an institutional email "
                f"({', '.join(allowed_domains)})"
            ),
            code=ErrorCode.INVALID_EMAIL_DOMAIN,
            details={"email": email, "allowed_domains": allowed_domains},
        )


class EmailAlreadyRegisteredError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            message=f"Email already registered: {email}",
            code=ErrorCode.EMAIL_ALREADY_REGISTERED,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str | UUID) -> None:
        self.user_id = user_id
        super().__init__(
            message=f"User not found: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )


class VerificationNotFoundError(EntityNotFoundError):
    """No pending verification exists for the email."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message=f"No pending verification for {email}",
            code=ErrorCode.VERIFICATION_NOT_FOUND,
            details={"email": email},
        )


class VerificationExpiredError(ValidationError):
    """The verification code has expired; registration must start again."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message="Verification code has expired, please register again",
            code=ErrorCode.VERIFICATION_EXPIRED,
            details={"email": email},
        )


class InvalidVerificationCodeError(ValidationError):
    """The submitted verification code does not match."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message="Invalid verification code",
            code=ErrorCode.INVALID_VERIFICATION_CODE,
            details={"email": email},
        )


class VerificationEmailError(ExternalServiceError):
    """The verification email could not be delivered."""

    def __init__(self, email: str, reason: str | None = None) -> None:
        super().__init__(
            message="Failed to send verification email",
            code=ErrorCode.EMAIL_DELIVERY_FAILED,
            details={"email": email, "reason": reason},
        )
