"""Registration with an emailed verification code.

Flow:
1. ``start_registration`` checks the email domain and that the address is
   still free, hashes the password, stores a pending verification with a
   fresh six digit code (replacing any earlier one) and emails the code.
2. ``verify_email`` checks the code, creates the user and its credentials,
   removes the pending record and returns an access token.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from unicredits.domain.user import (
    Email,
    EmailAlreadyRegisteredError,
    InvalidVerificationCodeError,
    PendingVerification,
    User,
    VerificationExpiredError,
    VerificationNotFoundError,
)
from unicredits.domain.user.entities.pending_verification import (
    DEFAULT_EXPIRY_MINUTES,
)
from unicredits.domain.user.value_objects import DEFAULT_ALLOWED_DOMAINS

if TYPE_CHECKING:
    from unicredits.application.ports import VerificationEmailSender
    from unicredits.domain.user import (
        PendingVerificationRepository,
        UserCredentialRepository,
        UserRepository,
    )
    from unicredits_auth import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


class RegistrationService:
    """Application service for verified sign-up."""

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        verification_repository: PendingVerificationRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        email_sender: VerificationEmailSender,
        allowed_domains: Iterable[str] = DEFAULT_ALLOWED_DOMAINS,
        code_expiry_minutes: int = DEFAULT_EXPIRY_MINUTES,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._verification_repo = verification_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._email_sender = email_sender
        self._allowed_domains = list(allowed_domains)
        self._code_expiry_minutes = code_expiry_minutes

    async def start_registration(self, email: str, password: str) -> str:
        """
        Begin registration and send a verification code.

        Returns
        -------
        The normalized email the code was sent to

        Raises
        ------
        InvalidEmailDomainError
            If the email is not an institutional address
        EmailAlreadyRegisteredError
            If a user with this email already exists
        WeakPasswordError
            If the password is too short or too long
        VerificationEmailError
            If the code could not be delivered
        """
        address = Email.institutional(email, self._allowed_domains).value

        if await self._user_repo.exists_by_email(address):
            raise EmailAlreadyRegisteredError(address)

        password_hash = self._password_service.hash(password)
        verification = PendingVerification.issue(
            email=address,
            password_hash=password_hash,
            expiry_minutes=self._code_expiry_minutes,
        )
        await self._verification_repo.upsert(verification)

        self._email_sender.send_verification_code(address, verification.code)
        logger.info("Verification code issued for %s", address)
        return address

    async def verify_email(self, email: str, code: str) -> tuple[User, str]:
        """
        Complete registration with the emailed code.

        An expired record is deleted before VerificationExpiredError is
        raised; callers must commit in that case for the deletion to stick.

        Raises
        ------
        VerificationNotFoundError
            If there is no pending registration for the email
        VerificationExpiredError
            If the code has expired
        InvalidVerificationCodeError
            If the code does not match
        EmailAlreadyRegisteredError
            If the email was registered in the meantime
        """
        address = Email(email).value

        pending = await self._verification_repo.find_by_email(address)
        if pending is None:
            raise VerificationNotFoundError(address)

        if pending.is_expired():
            await self._verification_repo.delete(address)
            logger.info("Expired verification removed for %s", address)
            raise VerificationExpiredError(address)

        if not pending.matches(code):
            raise InvalidVerificationCodeError(address)

        if await self._user_repo.exists_by_email(address):
            raise EmailAlreadyRegisteredError(address)

        user = User.create(address)
        await self._user_repo.save(user)
        await self._credential_repo.save(
            user_id=user.id,
            password_hash=pending.password_hash,
        )
        await self._verification_repo.delete(address)

        token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )
        logger.info("User registered: %s", address)
        return user, token
