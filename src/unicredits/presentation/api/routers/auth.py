"""Authentication router for registration, email verification and login."""

import logging

from fastapi import APIRouter, status

from unicredits.domain.user import User, VerificationExpiredError
from unicredits.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    DBSession,
    RegistrationSvc,
    SettingsDep,
)
from unicredits.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse,
    VerifyEmailRequest,
)
from unicredits_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_auth_response(
    user: User,
    access_token: str,
    settings: Settings,
) -> AuthResponse:
    return AuthResponse(
        user=UserResponse.model_validate(user),
        access_token=access_token,
        expires_in=settings.jwt_access_token_expire_hours * 3600,
    )


@router.post(
    "/register",
    summary="Start a registration",
    responses={
        200: {"description": "Verification code sent"},
        400: {"description": "Invalid email domain or weak password"},
        409: {"description": "Email already registered"},
        503: {"description": "Verification email could not be delivered"},
    },
)
async def register(
    request: RegisterRequest,
    registration: RegistrationSvc,
    session: DBSession,
) -> MessageResponse:
    """
    Send a verification code to an institutional email address.

    Re-registering before verification replaces the pending code.
    """
    try:
        address = await registration.start_registration(
            request.email,
            request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("Verification code sent to %s", address)
    return MessageResponse(message=f"Verification code sent to {address}")


@router.post(
    "/verify-email",
    status_code=status.HTTP_201_CREATED,
    summary="Confirm a registration",
    responses={
        201: {"description": "User created"},
        400: {"description": "Wrong or expired code"},
        404: {"description": "No pending registration for this email"},
        409: {"description": "Email already registered"},
    },
)
async def verify_email(
    request: VerifyEmailRequest,
    registration: RegistrationSvc,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    try:
        user, token = await registration.verify_email(request.email, request.code)
        await session.commit()
    except VerificationExpiredError:
        # The stale pending record was removed and that removal must persist
        await session.commit()
        raise
    except Exception:
        await session.rollback()
        raise

    logger.info("User registered: %s", user.email)
    return _create_auth_response(user, token, settings)


@router.post(
    "/login",
    summary="Log in with email and password",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> AuthResponse:
    user, token = await auth_service.login(request.email, request.password)
    return _create_auth_response(user, token, settings)


@router.get(
    "/me",
    summary="Get the current user",
    responses={
        200: {"description": "Current user"},
        401: {"description": "Not authenticated"},
    },
)
async def get_me(current_user: CurrentUser) -> UserResponse:
    return UserResponse.model_validate(current_user)
