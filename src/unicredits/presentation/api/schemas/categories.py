"""Course category schemas for request/response models.

Range checks (non-negative credits, non-blank names) are left to the domain
so every rule produces the same error codes regardless of the entry point.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictFloat


class CategoryCreateRequest(BaseModel):
    """Request schema for creating a category."""

    name: str = Field(..., description="Category name, unique per user")
    required_credits: StrictFloat = Field(
        ...,
        description="Credits required to satisfy this category",
    )
    order_index: Optional[StrictFloat] = Field(
        default=None,
        description="Display position (lower first, unset last)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Major Required",
                "required_credits": 40,
                "order_index": 1,
            },
        },
    )


class CategoryUpdateRequest(BaseModel):
    """Request schema for a partial category update.

    Only fields present in the body are applied. An explicit null
    order_index clears it.
    """

    name: Optional[str] = None
    required_credits: Optional[StrictFloat] = None
    order_index: Optional[StrictFloat] = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"required_credits": 44}},
    )


class CategoryResponse(BaseModel):
    id: UUID
    name: str
    required_credits: float
    order_index: Optional[float] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
