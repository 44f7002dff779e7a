"""Course schemas for request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictFloat

from unicredits.domain.academics import CourseStatus


class CourseCreateRequest(BaseModel):
    """Request schema for creating a course.

    A grade may only be given together with status COMPLETED. Numbers must be
    sent as JSON numbers, not strings.
    """

    name: str
    credits: StrictFloat = Field(..., description="Credit value of the course")
    category_id: UUID
    status: str = Field(
        default=CourseStatus.PENDING.value,
        description="PENDING, COMPLETED or PF",
    )
    grade: Optional[StrictFloat] = Field(
        default=None,
        description="Percentage grade in [0, 100], COMPLETED courses only",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Linear Algebra",
                "credits": 4,
                "category_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "status": "COMPLETED",
                "grade": 95,
            },
        },
    )


class CourseUpdateRequest(BaseModel):
    """Request schema for a partial course update.

    Moving a course out of COMPLETED drops its grade. An explicit null grade
    clears it.
    """

    name: Optional[str] = None
    credits: Optional[StrictFloat] = None
    category_id: Optional[UUID] = None
    status: Optional[str] = None
    grade: Optional[StrictFloat] = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"status": "COMPLETED", "grade": 70}},
    )


class CourseResponse(BaseModel):
    id: UUID
    category_id: UUID
    name: str
    credits: float
    status: CourseStatus
    grade: Optional[float] = None
    gpa_score: Optional[float] = Field(
        default=None,
        description="4.0-scale score derived from the grade",
    )
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
