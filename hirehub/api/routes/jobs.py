"""
Job routes.

Browsing and searching are anonymous. Postings are written by the employer
that owns them; admins may also delete.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.api.deps import is_admin, require_roles
from hirehub.core.database import get_db
from hirehub.core.exceptions import ForbiddenException
from hirehub.models.user import ROLE_ADMIN, ROLE_EMPLOYER, User
from hirehub.schemas.job import JobCreate, JobResponse, JobUpdate
from hirehub.services.employer_service import EmployerService
from hirehub.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])

job_service = JobService()
employer_service = EmployerService()


async def _ensure_employer_owner(db: AsyncSession, current_user: User, employer_id: uuid.UUID) -> None:
    if is_admin(current_user):
        return
    employer = await employer_service.get_by_id(db, employer_id)
    if employer.user_id != current_user.id:
        raise ForbiddenException("Not allowed to manage another employer's jobs")


@router.get("", response_model=List[JobResponse])
async def list_jobs(db: AsyncSession = Depends(get_db)):
    return await job_service.get_all(db)


@router.get("/search/title", response_model=List[JobResponse])
async def search_by_title(
    title: str = Query(..., min_length=1),
    db: AsyncSession = Depends(get_db),
):
    return await job_service.search_by_title(db, title)


@router.get("/search/location", response_model=List[JobResponse])
async def search_by_location(
    location: str = Query(..., min_length=1),
    db: AsyncSession = Depends(get_db),
):
    return await job_service.search_by_location(db, location)


@router.get("/search/skill", response_model=List[JobResponse])
async def search_by_skill(
    skill: str = Query(..., min_length=1),
    db: AsyncSession = Depends(get_db),
):
    return await job_service.search_by_skill(db, skill)


@router.get("/search/company", response_model=List[JobResponse])
async def search_by_company(
    company: str = Query(..., min_length=1),
    db: AsyncSession = Depends(get_db),
):
    return await job_service.search_by_company(db, company)


@router.get("/employer/{employer_id}", response_model=List[JobResponse])
async def list_jobs_by_employer(
    employer_id: uuid.UUID,
    current_user: User = Depends(require_roles(ROLE_EMPLOYER, ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    return await job_service.get_by_employer(db, employer_id)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, db: AsyncSession = Depends(get_db)):
    return await job_service.get_by_id(db, job_id)


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    body: JobCreate,
    current_user: User = Depends(require_roles(ROLE_EMPLOYER)),
    db: AsyncSession = Depends(get_db),
):
    await _ensure_employer_owner(db, current_user, body.employer_id)
    return await job_service.create(db, body)


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: int,
    body: JobUpdate,
    current_user: User = Depends(require_roles(ROLE_EMPLOYER)),
    db: AsyncSession = Depends(get_db),
):
    job = await job_service.get_by_id(db, job_id)
    await _ensure_employer_owner(db, current_user, job.employer_id)
    return await job_service.update(db, job_id, body)


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(
    job_id: int,
    current_user: User = Depends(require_roles(ROLE_EMPLOYER, ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    job = await job_service.get_by_id(db, job_id)
    await _ensure_employer_owner(db, current_user, job.employer_id)
    await job_service.delete(db, job_id)
