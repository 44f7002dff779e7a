"""Authentication service for password login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from unicredits.domain.user import Email, InvalidEmailError, User
from unicredits_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)

if TYPE_CHECKING:
    from unicredits.domain.user import UserCredentialRepository, UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Bridges the generic unicredits_auth building blocks (bcrypt, JWT) and
    the User aggregate. Accounts are created by RegistrationService; this
    service only logs existing users in.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """
        Authenticate with email and password.

        Returns
        -------
        The user and a fresh access token

        Raises
        ------
        InvalidCredentialsError
            If the email is unknown or the password is wrong; both cases
            look the same to the caller
        """
        try:
            normalized = Email(email)
        except InvalidEmailError as e:
            raise InvalidCredentialsError from e

        user = await self._user_repo.find_by_email(normalized)
        if user is None:
            raise InvalidCredentialsError

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, credential.password_hash):
            logger.info("Failed login for %s", normalized)
            raise InvalidCredentialsError

        logger.info("User logged in: %s", normalized)
        return user, self.issue_token(user)

    def issue_token(self, user: User) -> str:
        return self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
