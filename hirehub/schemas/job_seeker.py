"""
Job seeker schemas.
"""
from typing import Optional
from uuid import UUID

from pydantic import Field

from hirehub.schemas.base import BaseSchema


class JobSeekerUpdate(BaseSchema):
    education_details: Optional[str] = Field(None, max_length=300)
    skills: Optional[str] = Field(None, max_length=500)
    college: Optional[str] = Field(None, max_length=100)
    work_status: Optional[str] = Field(None, max_length=50)
    experience: Optional[str] = Field(None, max_length=100)


class JobSeekerCreate(JobSeekerUpdate):
    user_id: UUID


class JobSeekerResponse(BaseSchema):
    id: UUID
    user_id: UUID
    user_full_name: str = ""
    user_email: str = ""
    education_details: Optional[str] = None
    skills: Optional[str] = None
    college: Optional[str] = None
    work_status: Optional[str] = None
    experience: Optional[str] = None
