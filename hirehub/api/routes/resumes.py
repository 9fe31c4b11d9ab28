"""
Resume routes.

Job seekers manage their own resumes. File bytes never pass through the
API: ``POST /resumes/presign`` hands out a direct upload to storage and the
returned ``file_path`` is then recorded with ``POST /resumes``.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.api.deps import get_current_user, is_admin, require_roles
from hirehub.core.database import get_db
from hirehub.core.exceptions import ForbiddenException, ResumeNotFoundException
from hirehub.models.user import ROLE_ADMIN, ROLE_JOB_SEEKER, User
from hirehub.schemas.resume import (
    ResumeCreate,
    ResumeResponse,
    ResumeUpdate,
    ResumeUploadRequest,
    ResumeUploadResponse,
)
from hirehub.services.job_seeker_service import JobSeekerService
from hirehub.services.resume_service import ResumeService

router = APIRouter(prefix="/resumes", tags=["resumes"])

resume_service = ResumeService()
job_seeker_service = JobSeekerService()

job_seeker_only = require_roles(ROLE_JOB_SEEKER)


async def _ensure_job_seeker_owner(db: AsyncSession, current_user: User, job_seeker_id: uuid.UUID) -> None:
    if is_admin(current_user):
        return
    job_seeker = await job_seeker_service.get_by_id(db, job_seeker_id)
    if job_seeker.user_id != current_user.id:
        raise ForbiddenException("Not allowed to manage another job seeker's resumes")


@router.get("", response_model=List[ResumeResponse])
async def list_resumes(
    current_user: User = Depends(require_roles(ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    return await resume_service.get_all(db)


@router.get("/job-seeker/{job_seeker_id}", response_model=List[ResumeResponse])
async def list_resumes_by_job_seeker(
    job_seeker_id: uuid.UUID,
    current_user: User = Depends(require_roles(ROLE_ADMIN, ROLE_JOB_SEEKER)),
    db: AsyncSession = Depends(get_db),
):
    await _ensure_job_seeker_owner(db, current_user, job_seeker_id)
    return await resume_service.get_by_job_seeker(db, job_seeker_id)


@router.get("/job-seeker/{job_seeker_id}/default", response_model=ResumeResponse)
async def get_default_resume(
    job_seeker_id: uuid.UUID,
    current_user: User = Depends(require_roles(ROLE_ADMIN, ROLE_JOB_SEEKER)),
    db: AsyncSession = Depends(get_db),
):
    await _ensure_job_seeker_owner(db, current_user, job_seeker_id)
    resume = await resume_service.get_default_by_job_seeker(db, job_seeker_id)
    if resume is None:
        raise ResumeNotFoundException("No default resume set.")
    return resume


@router.post(
    "/job-seeker/{job_seeker_id}/set-default/{resume_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def set_default_resume(
    job_seeker_id: uuid.UUID,
    resume_id: int,
    current_user: User = Depends(job_seeker_only),
    db: AsyncSession = Depends(get_db),
):
    await _ensure_job_seeker_owner(db, current_user, job_seeker_id)
    await resume_service.set_default(db, job_seeker_id, resume_id)


@router.get("/{resume_id}", response_model=ResumeResponse)
async def get_resume(
    resume_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await resume_service.get_by_id(db, resume_id)


@router.post("/presign", response_model=ResumeUploadResponse)
async def presign_resume_upload(
    body: ResumeUploadRequest,
    current_user: User = Depends(job_seeker_only),
    db: AsyncSession = Depends(get_db),
):
    await _ensure_job_seeker_owner(db, current_user, body.job_seeker_id)
    return await resume_service.presign_upload(db, body)


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
async def create_resume(
    body: ResumeCreate,
    current_user: User = Depends(job_seeker_only),
    db: AsyncSession = Depends(get_db),
):
    await _ensure_job_seeker_owner(db, current_user, body.job_seeker_id)
    return await resume_service.create(db, body)


@router.put("/{resume_id}", response_model=ResumeResponse)
async def update_resume(
    resume_id: int,
    body: ResumeUpdate,
    current_user: User = Depends(job_seeker_only),
    db: AsyncSession = Depends(get_db),
):
    existing = await resume_service.get_by_id(db, resume_id)
    await _ensure_job_seeker_owner(db, current_user, existing.job_seeker_id)
    return await resume_service.update(db, resume_id, body)


@router.delete("/{resume_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resume(
    resume_id: int,
    current_user: User = Depends(job_seeker_only),
    db: AsyncSession = Depends(get_db),
):
    """409 while an application still references the resume."""
    existing = await resume_service.get_by_id(db, resume_id)
    await _ensure_job_seeker_owner(db, current_user, existing.job_seeker_id)
    await resume_service.delete(db, resume_id)
