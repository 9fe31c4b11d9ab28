"""
User schemas.
"""
from datetime import date, datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from hirehub.schemas.base import BaseSchema

Role = Literal["Employer", "JobSeeker", "Admin"]


class UserCreate(BaseSchema):
    """Registration body."""

    full_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=20)
    role: Role = "JobSeeker"
    date_of_birth: date
    gender: str = Field(..., min_length=1, max_length=10)
    address: Optional[str] = Field(None, max_length=250)

    @field_validator("email")
    @classmethod
    def _email_length(cls, value: str) -> str:
        if len(value) > 100:
            raise ValueError("Email must be at most 100 characters")
        return value.lower()


class UserUpdate(BaseSchema):
    """Full replace of the mutable profile fields."""

    full_name: str = Field(..., min_length=1, max_length=50)
    role: Role
    date_of_birth: date
    gender: str = Field(..., min_length=1, max_length=10)
    address: Optional[str] = Field(None, max_length=250)


class UserResponse(BaseSchema):
    id: UUID
    full_name: str
    email: str
    role: str
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    is_active: bool
    deactivated_at: Optional[datetime] = None
    scheduled_deletion_at: Optional[datetime] = None
    created_at: datetime
