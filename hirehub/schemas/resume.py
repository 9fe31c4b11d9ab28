"""
Resume schemas.
"""
from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import Field

from hirehub.schemas.base import BaseSchema


class ResumeUpdate(BaseSchema):
    resume_name: str = Field(..., min_length=1, max_length=150)
    file_path: str = Field(..., min_length=1, max_length=300)
    parsed_skills: Optional[str] = Field(None, max_length=800)
    file_type: Optional[str] = Field(None, max_length=10)
    is_default: bool = False


class ResumeCreate(ResumeUpdate):
    job_seeker_id: UUID


class ResumeResponse(BaseSchema):
    id: int
    job_seeker_id: UUID
    resume_name: str
    file_path: str
    parsed_skills: Optional[str] = None
    file_type: Optional[str] = None
    is_default: bool
    updated_at: datetime
    job_seeker_name: str = ""


class ResumeUploadRequest(BaseSchema):
    """Ask for a presigned POST to upload a resume file directly to storage."""

    job_seeker_id: UUID
    filename: str = Field(..., min_length=1, max_length=150)
    file_type: Literal["pdf", "doc", "docx"] = "pdf"


class ResumeUploadResponse(BaseSchema):
    """
    ``url`` and ``fields`` form the multipart POST; ``file_path`` is the key
    to send back when creating the resume record.
    """

    url: str
    fields: dict
    file_path: str
    max_size_bytes: int
