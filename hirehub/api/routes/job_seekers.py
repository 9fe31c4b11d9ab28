"""
Job seeker profile routes.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.api.deps import ensure_owner_or_admin, get_current_user, require_roles
from hirehub.core.database import get_db
from hirehub.models.user import ROLE_ADMIN, ROLE_JOB_SEEKER, User
from hirehub.schemas.job_seeker import JobSeekerCreate, JobSeekerResponse, JobSeekerUpdate
from hirehub.services.job_seeker_service import JobSeekerService

router = APIRouter(prefix="/job-seekers", tags=["job-seekers"])

job_seeker_service = JobSeekerService()

admin_or_job_seeker = require_roles(ROLE_ADMIN, ROLE_JOB_SEEKER)


@router.get("", response_model=List[JobSeekerResponse])
async def list_job_seekers(
    current_user: User = Depends(require_roles(ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    return await job_seeker_service.get_all(db)


@router.get("/search/college", response_model=List[JobSeekerResponse])
async def search_by_college(
    college: str = Query(..., min_length=1),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await job_seeker_service.search_by_college(db, college)


@router.get("/search/skill", response_model=List[JobSeekerResponse])
async def search_by_skill(
    skill: str = Query(..., min_length=1),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await job_seeker_service.search_by_skill(db, skill)


@router.get("/by-user/{user_id}", response_model=JobSeekerResponse)
async def get_job_seeker_by_user(
    user_id: uuid.UUID,
    current_user: User = Depends(admin_or_job_seeker),
    db: AsyncSession = Depends(get_db),
):
    return await job_seeker_service.get_by_user_id(db, user_id)


@router.get("/{job_seeker_id}", response_model=JobSeekerResponse)
async def get_job_seeker(
    job_seeker_id: uuid.UUID,
    current_user: User = Depends(require_roles(ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    return await job_seeker_service.get_by_id(db, job_seeker_id)


@router.post("", response_model=JobSeekerResponse, status_code=status.HTTP_201_CREATED)
async def create_job_seeker(
    body: JobSeekerCreate,
    current_user: User = Depends(admin_or_job_seeker),
    db: AsyncSession = Depends(get_db),
):
    ensure_owner_or_admin(current_user, body.user_id)
    return await job_seeker_service.create(db, body)


@router.put("/{job_seeker_id}", response_model=JobSeekerResponse)
async def update_job_seeker(
    job_seeker_id: uuid.UUID,
    body: JobSeekerUpdate,
    current_user: User = Depends(admin_or_job_seeker),
    db: AsyncSession = Depends(get_db),
):
    existing = await job_seeker_service.get_by_id(db, job_seeker_id)
    ensure_owner_or_admin(current_user, existing.user_id)
    return await job_seeker_service.update(db, job_seeker_id, body)


@router.delete("/{job_seeker_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job_seeker(
    job_seeker_id: uuid.UUID,
    current_user: User = Depends(admin_or_job_seeker),
    db: AsyncSession = Depends(get_db),
):
    """409 while the profile still has resumes or applications."""
    existing = await job_seeker_service.get_by_id(db, job_seeker_id)
    ensure_owner_or_admin(current_user, existing.user_id)
    await job_seeker_service.delete(db, job_seeker_id)
