from unicredits.domain.user.entities.pending_verification import (
    CODE_LENGTH,
    PendingVerification,
    generate_verification_code,
)

__all__ = ["CODE_LENGTH", "PendingVerification", "generate_verification_code"]
