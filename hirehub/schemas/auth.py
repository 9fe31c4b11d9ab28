"""
Authentication schemas.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from hirehub.schemas.base import BaseSchema


class LoginRequest(BaseSchema):
    """Login request body."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthResponse(BaseSchema):
    """Issued bearer token and the identity it carries."""

    token: str
    token_type: str = "bearer"
    expires_at: datetime
    role: str
    user_id: UUID


class ForgotPasswordRequest(BaseSchema):
    """
    Forgot password request body.

    ``origin_base_url`` lets the SPA choose the host the reset link points
    at; the configured frontend URL is used when it is omitted.
    """

    email: EmailStr
    origin_base_url: Optional[str] = Field(None, max_length=300)


class ResetPasswordRequest(BaseSchema):
    """Reset password request body."""

    token: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=20)
