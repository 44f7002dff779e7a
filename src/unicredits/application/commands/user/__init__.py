from unicredits.application.commands.user.complete_onboarding_command import (
    CompleteOnboardingCommand,
)

__all__ = ["CompleteOnboardingCommand"]
