"""Onboarding schemas."""

from pydantic import BaseModel, ConfigDict, Field, StrictFloat


class CompleteOnboardingRequest(BaseModel):
    graduation_total_credits: StrictFloat = Field(
        ...,
        description="Total credits required to graduate",
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"graduation_total_credits": 140}},
    )
