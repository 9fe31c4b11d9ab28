"""
Application service - submissions and the employer review workflow.

``status`` is free text. Shortlisting, reviewing and interview scheduling
are targeted field updates, not guarded transitions. Whenever a write
changes the status, the applicant gets a notification (with email) whose
wording depends on the new status; the employer is notified of every new
submission. Those notifications are best-effort and never undo the write.
"""
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.core.email import EmailSender
from hirehub.core.email_templates import format_interview_time
from hirehub.core.exceptions import (
    APIException,
    ApplicationNotFoundException,
    BadRequestException,
    JobNotFoundException,
    JobSeekerNotFoundException,
    ResumeNotFoundException,
)
from hirehub.core.logging import get_logger
from hirehub.models.application import (
    APPLICATION_STATUS_APPLIED,
    APPLICATION_STATUS_INTERVIEW,
    APPLICATION_STATUS_REJECTED,
    APPLICATION_STATUS_SHORTLISTED,
    Application,
)
from hirehub.models.base import utcnow
from hirehub.repositories.application_repository import ApplicationRepository
from hirehub.repositories.job_repository import JobRepository
from hirehub.repositories.job_seeker_repository import JobSeekerRepository
from hirehub.repositories.resume_repository import ResumeRepository
from hirehub.schemas.application import ApplicationCreate, ApplicationResponse, ApplicationUpdate
from hirehub.schemas.notification import NotificationCreate
from hirehub.services.notification_service import (
    MESSAGE_MAX_LENGTH,
    SUBJECT_MAX_LENGTH,
    NotificationService,
    clip,
)

logger = get_logger(__name__)


def to_application_response(application: Application) -> ApplicationResponse:
    job_seeker = application.job_seeker
    return ApplicationResponse(
        id=application.id,
        job_id=application.job_id,
        job_seeker_id=application.job_seeker_id,
        resume_id=application.resume_id,
        job_title=application.job.title if application.job else "",
        job_seeker_name=job_seeker.user.full_name if job_seeker and job_seeker.user else "",
        cover_letter=application.cover_letter,
        status=application.status,
        applied_at=application.applied_at,
        reviewed_at=application.reviewed_at,
        notes=application.notes,
        is_shortlisted=application.is_shortlisted,
        interview_date=application.interview_date,
        employer_feedback=application.employer_feedback,
    )


def status_change_message(
    new_status: str,
    job_title: str,
    employer_name: str,
    interview_date: Optional[datetime] = None,
) -> Tuple[str, str]:
    """(subject, message) sent to the applicant when the status changes."""
    status = new_status.lower()

    if status == APPLICATION_STATUS_SHORTLISTED.lower():
        return (
            f"You are shortlisted for {job_title}",
            f"Congratulations! You have been shortlisted for {job_title} at {employer_name}. "
            "Please check your application for details.",
        )
    if APPLICATION_STATUS_INTERVIEW.lower() in status:
        when = f" Interview scheduled on {format_interview_time(interview_date)}." if interview_date else ""
        return (
            f"Interview scheduled for {job_title}",
            f"Your interview for {job_title} at {employer_name} is scheduled.{when}",
        )
    if status == APPLICATION_STATUS_REJECTED.lower():
        return (
            f"Application update: {job_title}",
            f"We're sorry, your application for {job_title} at {employer_name} was not selected.",
        )
    return (
        f"Update: {job_title}",
        f"Your application status changed to '{new_status}' for {job_title}.",
    )


class ApplicationService:
    """Handles application submission and review."""

    def __init__(self):
        self.application_repo = ApplicationRepository()
        self.job_repo = JobRepository()
        self.job_seeker_repo = JobSeekerRepository()
        self.resume_repo = ResumeRepository()
        self.notification_service = NotificationService()

    # ── Reads ────────────────────────────────────────────────────────────────

    async def get_all(self, db: AsyncSession) -> List[ApplicationResponse]:
        return [to_application_response(a) for a in await self.application_repo.get_all(db)]

    async def get_by_id(self, db: AsyncSession, application_id: int) -> ApplicationResponse:
        return to_application_response(await self._get_or_raise(db, application_id))

    async def get_by_job(self, db: AsyncSession, job_id: int) -> List[ApplicationResponse]:
        return [to_application_response(a) for a in await self.application_repo.get_by_job(db, job_id)]

    async def get_by_job_seeker(self, db: AsyncSession, job_seeker_id: UUID) -> List[ApplicationResponse]:
        applications = await self.application_repo.get_by_job_seeker(db, job_seeker_id)
        return [to_application_response(a) for a in applications]

    async def get_shortlisted_by_job(self, db: AsyncSession, job_id: int) -> List[ApplicationResponse]:
        applications = await self.application_repo.get_shortlisted_by_job(db, job_id)
        return [to_application_response(a) for a in applications]

    async def get_with_interview(self, db: AsyncSession, job_id: int) -> List[ApplicationResponse]:
        applications = await self.application_repo.get_with_interview_by_job(db, job_id)
        return [to_application_response(a) for a in applications]

    async def count(self, db: AsyncSession) -> int:
        return await self.application_repo.count(db)

    # ── Writes ───────────────────────────────────────────────────────────────

    async def create(
        self,
        db: AsyncSession,
        data: ApplicationCreate,
        email_sender: EmailSender,
    ) -> ApplicationResponse:
        """
        Submit an application. Without ``resume_id`` the job seeker's
        default resume is used.

        Raises:
            JobNotFoundException / JobSeekerNotFoundException: Unknown references.
            ResumeNotFoundException: The resume is missing or not the job seeker's.
            BadRequestException: No resume given and no default resume set.
        """
        if not await self.job_repo.get_by_id(db, data.job_id):
            raise JobNotFoundException(data.job_id)
        if not await self.job_seeker_repo.get_by_id(db, data.job_seeker_id):
            raise JobSeekerNotFoundException(f"JobSeeker with id '{data.job_seeker_id}' not found.")

        resume_id = await self._resolve_resume(db, data.job_seeker_id, data.resume_id)

        application = await self.application_repo.create(
            db,
            job_id=data.job_id,
            job_seeker_id=data.job_seeker_id,
            resume_id=resume_id,
            cover_letter=data.cover_letter,
            status=APPLICATION_STATUS_APPLIED,
            applied_at=utcnow(),
        )
        await db.commit()
        logger.info("application_created", application_id=application.id, job_id=data.job_id)

        applicant_name = application.job_seeker.user.full_name or "A candidate"
        job_title = application.job.title
        await self._notify(
            db,
            email_sender,
            user_id=application.job.employer.user_id,
            subject=f"New applicant for {job_title}",
            message=f"{applicant_name} has applied for '{job_title}'.",
            application_id=application.id,
        )

        return to_application_response(await self._get_or_raise(db, application.id))

    async def update(
        self,
        db: AsyncSession,
        application_id: int,
        data: ApplicationUpdate,
        email_sender: EmailSender,
    ) -> ApplicationResponse:
        """Full replace of the employer-editable fields; any status string is accepted."""
        application = await self._get_or_raise(db, application_id)
        return await self._apply(
            db,
            application,
            email_sender,
            status=data.status,
            cover_letter=data.cover_letter,
            is_shortlisted=bool(data.is_shortlisted),
            interview_date=data.interview_date,
            employer_feedback=data.employer_feedback,
        )

    async def mark_reviewed(
        self,
        db: AsyncSession,
        application_id: int,
        notes: Optional[str] = None,
    ) -> ApplicationResponse:
        """Stamp ``reviewed_at``; non-blank notes replace the current ones."""
        application = await self._get_or_raise(db, application_id)

        changes = {"reviewed_at": utcnow()}
        if notes and notes.strip():
            changes["notes"] = notes
        application = await self.application_repo.update(db, application, **changes)
        await db.commit()

        logger.info("application_reviewed", application_id=application_id)
        return to_application_response(application)

    async def shortlist(
        self,
        db: AsyncSession,
        application_id: int,
        email_sender: EmailSender,
    ) -> ApplicationResponse:
        application = await self._get_or_raise(db, application_id)
        return await self._apply(
            db,
            application,
            email_sender,
            is_shortlisted=True,
            status=APPLICATION_STATUS_SHORTLISTED,
        )

    async def schedule_interview(
        self,
        db: AsyncSession,
        application_id: int,
        interview_date: datetime,
        email_sender: EmailSender,
    ) -> ApplicationResponse:
        application = await self._get_or_raise(db, application_id)
        return await self._apply(
            db,
            application,
            email_sender,
            interview_date=interview_date,
            status=APPLICATION_STATUS_INTERVIEW,
        )

    async def delete(self, db: AsyncSession, application_id: int) -> None:
        if not await self.application_repo.delete(db, application_id):
            raise ApplicationNotFoundException(application_id)
        await db.commit()
        logger.info("application_deleted", application_id=application_id)

    # ── Helpers ──────────────────────────────────────────────────────────────

    async def _get_or_raise(self, db: AsyncSession, application_id: int) -> Application:
        application = await self.application_repo.get_by_id(db, application_id)
        if not application:
            raise ApplicationNotFoundException(application_id)
        return application

    async def _resolve_resume(
        self,
        db: AsyncSession,
        job_seeker_id: UUID,
        resume_id: Optional[int],
    ) -> int:
        if resume_id is None:
            default = await self.resume_repo.get_default(db, job_seeker_id)
            if not default:
                raise BadRequestException(
                    "No resume selected and no default resume set.",
                    code="NO_DEFAULT_RESUME",
                )
            return default.id

        resume = await self.resume_repo.get_by_id(db, resume_id)
        if not resume or resume.job_seeker_id != job_seeker_id:
            raise ResumeNotFoundException(
                f"Resume with id '{resume_id}' not found for jobSeeker {job_seeker_id}."
            )
        return resume.id

    async def _apply(
        self,
        db: AsyncSession,
        application: Application,
        email_sender: EmailSender,
        **changes,
    ) -> ApplicationResponse:
        """Write the changes and notify the applicant if the status moved."""
        old_status = application.status
        application = await self.application_repo.update(db, application, **changes)
        await db.commit()

        new_status = application.status or ""
        if old_status.lower() != new_status.lower():
            logger.info(
                "application_status_changed",
                application_id=application.id,
                old_status=old_status,
                new_status=new_status,
            )
            job = application.job
            subject, message = status_change_message(
                new_status,
                job.title,
                job.employer.company_name if job.employer else "the employer",
                application.interview_date,
            )
            await self._notify(
                db,
                email_sender,
                user_id=application.job_seeker.user_id,
                subject=subject,
                message=message,
                application_id=application.id,
            )
            application = await self._get_or_raise(db, application.id)

        return to_application_response(application)

    async def _notify(
        self,
        db: AsyncSession,
        email_sender: EmailSender,
        *,
        user_id: UUID,
        subject: str,
        message: str,
        application_id: int,
    ) -> None:
        try:
            await self.notification_service.create(
                db,
                NotificationCreate(
                    user_id=user_id,
                    subject=clip(subject, SUBJECT_MAX_LENGTH),
                    message=clip(message, MESSAGE_MAX_LENGTH),
                    send_email=True,
                ),
                email_sender,
            )
        except (APIException, SQLAlchemyError):
            await db.rollback()
            logger.exception("application_notification_failed", application_id=application_id)
