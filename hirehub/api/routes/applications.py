"""
Application routes.

Job seekers submit and withdraw their own applications; the employer that
owns the job reviews them. Admins can do either.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.api.deps import get_current_user, is_admin, require_roles
from hirehub.core.database import get_db
from hirehub.core.email import EmailSender, get_email_sender
from hirehub.core.exceptions import ForbiddenException
from hirehub.models.user import ROLE_ADMIN, ROLE_EMPLOYER, ROLE_JOB_SEEKER, User
from hirehub.schemas.application import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationUpdate,
    ReviewRequest,
    ScheduleInterviewRequest,
)
from hirehub.services.application_service import ApplicationService
from hirehub.services.employer_service import EmployerService
from hirehub.services.job_seeker_service import JobSeekerService
from hirehub.services.job_service import JobService

router = APIRouter(prefix="/applications", tags=["applications"])

application_service = ApplicationService()
job_service = JobService()
employer_service = EmployerService()
job_seeker_service = JobSeekerService()

employer_or_admin = require_roles(ROLE_EMPLOYER, ROLE_ADMIN)
job_seeker_or_admin = require_roles(ROLE_JOB_SEEKER, ROLE_ADMIN)


async def _ensure_job_owner(db: AsyncSession, current_user: User, job_id: int) -> None:
    if is_admin(current_user):
        return
    job = await job_service.get_by_id(db, job_id)
    employer = await employer_service.get_by_id(db, job.employer_id)
    if employer.user_id != current_user.id:
        raise ForbiddenException("Not allowed to manage applications for another employer's job")


async def _ensure_job_seeker_owner(db: AsyncSession, current_user: User, job_seeker_id: uuid.UUID) -> None:
    if is_admin(current_user):
        return
    job_seeker = await job_seeker_service.get_by_id(db, job_seeker_id)
    if job_seeker.user_id != current_user.id:
        raise ForbiddenException("Not allowed to act for another job seeker")


@router.get("", response_model=List[ApplicationResponse])
async def list_applications(
    current_user: User = Depends(require_roles(ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    return await application_service.get_all(db)


@router.get("/job/{job_id}", response_model=List[ApplicationResponse])
async def list_by_job(
    job_id: int,
    current_user: User = Depends(employer_or_admin),
    db: AsyncSession = Depends(get_db),
):
    await _ensure_job_owner(db, current_user, job_id)
    return await application_service.get_by_job(db, job_id)


@router.get("/job/{job_id}/shortlisted", response_model=List[ApplicationResponse])
async def list_shortlisted(
    job_id: int,
    current_user: User = Depends(employer_or_admin),
    db: AsyncSession = Depends(get_db),
):
    await _ensure_job_owner(db, current_user, job_id)
    return await application_service.get_shortlisted_by_job(db, job_id)


@router.get("/job/{job_id}/interviews", response_model=List[ApplicationResponse])
async def list_interviews(
    job_id: int,
    current_user: User = Depends(employer_or_admin),
    db: AsyncSession = Depends(get_db),
):
    await _ensure_job_owner(db, current_user, job_id)
    return await application_service.get_with_interview(db, job_id)


@router.get("/job-seeker/{job_seeker_id}", response_model=List[ApplicationResponse])
async def list_by_job_seeker(
    job_seeker_id: uuid.UUID,
    current_user: User = Depends(job_seeker_or_admin),
    db: AsyncSession = Depends(get_db),
):
    await _ensure_job_seeker_owner(db, current_user, job_seeker_id)
    return await application_service.get_by_job_seeker(db, job_seeker_id)


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await application_service.get_by_id(db, application_id)


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(
    body: ApplicationCreate,
    current_user: User = Depends(require_roles(ROLE_JOB_SEEKER)),
    db: AsyncSession = Depends(get_db),
    email_sender: EmailSender = Depends(get_email_sender),
):
    await _ensure_job_seeker_owner(db, current_user, body.job_seeker_id)
    return await application_service.create(db, body, email_sender)


@router.put("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: int,
    body: ApplicationUpdate,
    current_user: User = Depends(employer_or_admin),
    db: AsyncSession = Depends(get_db),
    email_sender: EmailSender = Depends(get_email_sender),
):
    existing = await application_service.get_by_id(db, application_id)
    await _ensure_job_owner(db, current_user, existing.job_id)
    return await application_service.update(db, application_id, body, email_sender)


@router.post("/{application_id}/review", response_model=ApplicationResponse)
async def review_application(
    application_id: int,
    body: ReviewRequest,
    current_user: User = Depends(employer_or_admin),
    db: AsyncSession = Depends(get_db),
):
    existing = await application_service.get_by_id(db, application_id)
    await _ensure_job_owner(db, current_user, existing.job_id)
    return await application_service.mark_reviewed(db, application_id, body.notes)


@router.post("/{application_id}/shortlist", response_model=ApplicationResponse)
async def shortlist_application(
    application_id: int,
    current_user: User = Depends(employer_or_admin),
    db: AsyncSession = Depends(get_db),
    email_sender: EmailSender = Depends(get_email_sender),
):
    existing = await application_service.get_by_id(db, application_id)
    await _ensure_job_owner(db, current_user, existing.job_id)
    return await application_service.shortlist(db, application_id, email_sender)


@router.post("/{application_id}/schedule-interview", response_model=ApplicationResponse)
async def schedule_interview(
    application_id: int,
    body: ScheduleInterviewRequest,
    current_user: User = Depends(employer_or_admin),
    db: AsyncSession = Depends(get_db),
    email_sender: EmailSender = Depends(get_email_sender),
):
    existing = await application_service.get_by_id(db, application_id)
    await _ensure_job_owner(db, current_user, existing.job_id)
    return await application_service.schedule_interview(
        db, application_id, body.interview_date, email_sender
    )


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_application(
    application_id: int,
    current_user: User = Depends(job_seeker_or_admin),
    db: AsyncSession = Depends(get_db),
):
    existing = await application_service.get_by_id(db, application_id)
    await _ensure_job_seeker_owner(db, current_user, existing.job_seeker_id)
    await application_service.delete(db, application_id)
