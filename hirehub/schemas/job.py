"""
Job posting schemas.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from hirehub.schemas.base import BaseSchema


class JobBase(BaseSchema):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=1000)
    location: Optional[str] = Field(None, max_length=150)
    salary: Optional[float] = Field(None, ge=0)
    skills_required: Optional[str] = Field(None, max_length=500)
    academic_eligibility: Optional[str] = Field(None, max_length=300)
    allowed_batches: Optional[str] = Field(None, max_length=200)
    backlogs: Optional[int] = Field(None, ge=0)


class JobCreate(JobBase):
    employer_id: UUID


class JobUpdate(JobBase):
    status: str = Field("Open", min_length=1, max_length=50)


class JobResponse(BaseSchema):
    id: int
    employer_id: UUID
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[float] = None
    skills_required: Optional[str] = None
    academic_eligibility: Optional[str] = None
    allowed_batches: Optional[str] = None
    backlogs: Optional[int] = None
    status: str
    created_at: datetime
    employer_name: str = ""
