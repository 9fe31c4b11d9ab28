"""
Application schemas.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from hirehub.schemas.base import BaseSchema


class ApplicationCreate(BaseSchema):
    job_id: int
    job_seeker_id: UUID
    # Omitted: the job seeker's default resume is used
    resume_id: Optional[int] = None
    cover_letter: Optional[str] = None


class ApplicationUpdate(BaseSchema):
    status: str = Field("Applied", min_length=1, max_length=50)
    cover_letter: Optional[str] = None
    is_shortlisted: Optional[bool] = None
    interview_date: Optional[datetime] = None
    employer_feedback: Optional[str] = Field(None, max_length=1000)


class ReviewRequest(BaseSchema):
    notes: Optional[str] = Field(None, max_length=1000)


class ScheduleInterviewRequest(BaseSchema):
    interview_date: datetime


class ApplicationResponse(BaseSchema):
    id: int
    job_id: int
    job_seeker_id: UUID
    resume_id: Optional[int] = None
    job_title: str = ""
    job_seeker_name: str = ""
    cover_letter: Optional[str] = None
    status: str
    applied_at: datetime
    reviewed_at: Optional[datetime] = None
    notes: Optional[str] = None
    is_shortlisted: bool = False
    interview_date: Optional[datetime] = None
    employer_feedback: Optional[str] = None
