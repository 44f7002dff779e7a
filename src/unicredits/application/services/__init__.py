"""Application services - identity workflows spanning several repositories."""

from unicredits.application.services.authentication_service import (
    AuthenticationService,
)
from unicredits.application.services.registration_service import (
    RegistrationService,
)

__all__ = ["AuthenticationService", "RegistrationService"]
