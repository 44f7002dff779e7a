"""Onboarding router: records the user's graduation credit goal."""

import logging

from fastapi import APIRouter

from unicredits.application.commands.user import CompleteOnboardingCommand
from unicredits.presentation.api.dependencies import RepoFactory
from unicredits.presentation.api.schemas.auth import UserResponse
from unicredits.presentation.api.schemas.onboarding import (
    CompleteOnboardingRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.put(
    "/complete",
    summary="Complete onboarding",
    responses={
        200: {"description": "Graduation goal stored"},
        400: {"description": "Invalid graduation credit total"},
        401: {"description": "Not authenticated"},
    },
)
async def complete_onboarding(
    request: CompleteOnboardingRequest,
    factory: RepoFactory,
) -> UserResponse:
    """
    Set the total credits needed to graduate.

    Calling this again overwrites the previous goal.
    """
    command = CompleteOnboardingCommand.from_factory(factory)
    try:
        user = await command.execute(request.graduation_total_credits)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.model_validate(user)
