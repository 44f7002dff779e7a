"""Credit summary schemas."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CategorySummaryResponse(BaseModel):
    id: UUID
    name: str
    required_credits: float
    earned_credits: float
    remaining_credits: float

    model_config = ConfigDict(from_attributes=True)


class CreditSummaryResponse(BaseModel):
    """Credits earned against the graduation goal and per category."""

    graduation_total_credits: Optional[float] = None
    total_required_from_categories: float
    total_earned_credits: float
    total_remaining_credits: Optional[float] = Field(
        default=None,
        description="Null until a graduation goal is set",
    )
    overall_gpa: Optional[float] = Field(
        default=None,
        description="Credit-weighted GPA over graded completed courses",
    )
    categories: list[CategorySummaryResponse]

    model_config = ConfigDict(from_attributes=True)
