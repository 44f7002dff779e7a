"""FastAPI dependencies.

One engine per process, one session per request. Authenticated routes get
a ``RepoFactory`` whose repositories only see the caller's rows.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from unicredits.application.ports import identity
from unicredits.application.services import (
    AuthenticationService,
    RegistrationService,
)
from unicredits.domain.user import User
from unicredits.infrastructure.email import EmailService
from unicredits.infrastructure.persistence.sqlalchemy.repositories import (
    PendingVerificationRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from unicredits.presentation.api.config import get_api_settings
from unicredits_auth import InvalidTokenError, JWTService, PasswordHashingService
from unicredits_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


@lru_cache()
def get_database_url() -> str:
    url = get_settings().database_url

    # File-backed SQLite needs its directory
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


def get_email_service(settings: SettingsDep) -> EmailService:
    return EmailService(settings)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_registration_service(  # noqa: PLR0913
    session: DBSession,
    settings: SettingsDep,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
    email_service: EmailService = Depends(get_email_service),
) -> RegistrationService:
    """
    Get registration service with all dependencies.

    Orchestrates verification codes, user creation and token issuance.
    """
    return RegistrationService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        verification_repository=PendingVerificationRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
        email_sender=email_service,
        allowed_domains=settings.email_domains,
        code_expiry_minutes=settings.verification_code_expire_minutes,
    )


RegistrationSvc = Annotated[RegistrationService, Depends(get_registration_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    Resolve the bearer token to a stored user.

    Every failure is an ``InvalidTokenError``, answered with 401 and
    ``WWW-Authenticate: Bearer`` by the auth exception handler.
    """
    if credentials is None:
        raise InvalidTokenError("Authentication required")

    payload = jwt_service.verify_token(credentials.credentials)
    if not payload.is_access_token():
        raise InvalidTokenError("Invalid token type")

    user = await UserRepositorySQLAlchemy(session).find_by_id(payload.user_id)
    if user is None:
        # Account removed after the token was issued
        logger.warning("Token for unknown user %s", payload.user_id)
        raise InvalidTokenError("User not found")

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_repository_factory(
    session: AsyncSession = Depends(get_db_session),
    user: User = Depends(get_current_user),
) -> SQLAlchemyRepositoryFactory:
    """Repositories scoped to the authenticated user, sharing the request session."""
    return SQLAlchemyRepositoryFactory(
        session=session,
        current_user=identity.CurrentUser.from_user(user),
    )


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
