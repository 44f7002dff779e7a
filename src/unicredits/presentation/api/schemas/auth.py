"""Authentication schemas for request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request schema for starting a registration.

    The password is checked by the password service so that too short or
    too long passwords surface as WEAK_PASSWORD.
    """

    email: EmailStr = Field(..., description="Institutional email address")
    password: str = Field(..., description="Password (6-128 characters)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "student@stu.pku.edu.cn",
                "password": "securepassword123",
            },
        },
    )


class VerifyEmailRequest(BaseModel):
    """Request schema for confirming a registration with the emailed code."""

    email: EmailStr
    code: str = Field(..., description="6-digit verification code")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "student@stu.pku.edu.cn",
                "code": "482913",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    # Plain str so a malformed address is reported as bad credentials
    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "student@stu.pku.edu.cn",
                "password": "securepassword123",
            },
        },
    )


class MessageResponse(BaseModel):
    message: str


class UserResponse(BaseModel):
    """Response schema for user information."""

    id: UUID
    email: str
    has_completed_setup: bool
    graduation_total_credits: Optional[float] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Response schema for successful verification or login."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Access token lifetime in seconds")
