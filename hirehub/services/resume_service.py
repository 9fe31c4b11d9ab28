"""
Resume service - CV records, the default-resume flag and direct uploads.

A resume's ``file_path`` is either a path/URL supplied by the client or an
object key obtained from ``presign_upload``. Only keys we issued are removed
from the bucket when the record is deleted, and that removal never blocks
the delete.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.core import storage
from hirehub.core.config import settings
from hirehub.core.exceptions import (
    ConflictException,
    JobSeekerNotFoundException,
    ResumeInUseException,
    ResumeNotFoundException,
)
from hirehub.core.logging import get_logger
from hirehub.models.base import utcnow
from hirehub.models.resume import Resume
from hirehub.repositories.job_seeker_repository import JobSeekerRepository
from hirehub.repositories.resume_repository import ResumeRepository
from hirehub.schemas.resume import (
    ResumeCreate,
    ResumeResponse,
    ResumeUpdate,
    ResumeUploadRequest,
    ResumeUploadResponse,
)

logger = get_logger(__name__)


def to_resume_response(resume: Resume) -> ResumeResponse:
    job_seeker = resume.job_seeker
    name = job_seeker.user.full_name if job_seeker and job_seeker.user else ""
    return ResumeResponse(
        id=resume.id,
        job_seeker_id=resume.job_seeker_id,
        resume_name=resume.resume_name,
        file_path=resume.file_path,
        parsed_skills=resume.parsed_skills,
        file_type=resume.file_type,
        is_default=resume.is_default,
        updated_at=resume.updated_at,
        job_seeker_name=name,
    )


class ResumeService:
    def __init__(self):
        self.resume_repo = ResumeRepository()
        self.job_seeker_repo = JobSeekerRepository()

    async def get_all(self, db: AsyncSession) -> List[ResumeResponse]:
        return [to_resume_response(r) for r in await self.resume_repo.get_all(db)]

    async def get_by_id(self, db: AsyncSession, resume_id: int) -> ResumeResponse:
        resume = await self.resume_repo.get_by_id(db, resume_id)
        if not resume:
            raise ResumeNotFoundException(f"Resume with id '{resume_id}' not found.")
        return to_resume_response(resume)

    async def get_by_job_seeker(self, db: AsyncSession, job_seeker_id: UUID) -> List[ResumeResponse]:
        return [to_resume_response(r) for r in await self.resume_repo.get_by_job_seeker(db, job_seeker_id)]

    async def get_default_by_job_seeker(
        self,
        db: AsyncSession,
        job_seeker_id: UUID,
    ) -> Optional[ResumeResponse]:
        resume = await self.resume_repo.get_default(db, job_seeker_id)
        return to_resume_response(resume) if resume else None

    async def create(self, db: AsyncSession, data: ResumeCreate) -> ResumeResponse:
        """
        Raises:
            JobSeekerNotFoundException: If the owner does not exist.
            ConflictException: If the job seeker already has a resume with this name.
        """
        if not await self.job_seeker_repo.get_by_id(db, data.job_seeker_id):
            raise JobSeekerNotFoundException(f"JobSeeker with id '{data.job_seeker_id}' not found.")
        if await self.resume_repo.name_exists(db, data.job_seeker_id, data.resume_name):
            raise ConflictException(
                f"Resume '{data.resume_name}' already exists for this JobSeeker.",
                code="RESUME_NAME_EXISTS",
            )

        resume = await self.resume_repo.create(
            db,
            job_seeker_id=data.job_seeker_id,
            resume_name=data.resume_name,
            file_path=data.file_path,
            parsed_skills=data.parsed_skills,
            file_type=data.file_type,
            is_default=data.is_default,
            updated_at=utcnow(),
        )
        await db.commit()

        if resume.is_default:
            await self._set_default(db, resume.job_seeker_id, resume.id)
            resume = await self.resume_repo.get_by_id(db, resume.id)

        logger.info("resume_created", resume_id=resume.id, job_seeker_id=str(data.job_seeker_id))
        return to_resume_response(resume)

    async def update(self, db: AsyncSession, resume_id: int, data: ResumeUpdate) -> ResumeResponse:
        resume = await self.resume_repo.get_by_id(db, resume_id)
        if not resume:
            raise ResumeNotFoundException(f"Resume with id '{resume_id}' not found.")
        if await self.resume_repo.name_exists(db, resume.job_seeker_id, data.resume_name, exclude_id=resume_id):
            raise ConflictException(
                f"Resume '{data.resume_name}' already exists for this JobSeeker.",
                code="RESUME_NAME_EXISTS",
            )

        resume = await self.resume_repo.update(
            db,
            resume,
            resume_name=data.resume_name,
            file_path=data.file_path,
            parsed_skills=data.parsed_skills,
            file_type=data.file_type,
            is_default=data.is_default,
            updated_at=utcnow(),
        )
        await db.commit()

        if resume.is_default:
            await self._set_default(db, resume.job_seeker_id, resume.id)
            resume = await self.resume_repo.get_by_id(db, resume.id)

        return to_resume_response(resume)

    async def delete(self, db: AsyncSession, resume_id: int) -> None:
        """
        Raises:
            ResumeNotFoundException: If the resume does not exist.
            ResumeInUseException: If an application references it.
        """
        resume = await self.resume_repo.get_by_id(db, resume_id)
        if not resume:
            raise ResumeNotFoundException(f"Resume with id '{resume_id}' not found.")
        if await self.resume_repo.is_referenced(db, resume_id):
            logger.info("resume_delete_blocked", resume_id=resume_id)
            raise ResumeInUseException()

        file_path = resume.file_path
        await self.resume_repo.delete(db, resume_id)
        await db.commit()
        logger.info("resume_deleted", resume_id=resume_id)

        if storage.is_resume_key(file_path):
            await storage.delete_object(file_path)

    async def set_default(self, db: AsyncSession, job_seeker_id: UUID, resume_id: int) -> None:
        """Raises ResumeNotFoundException when the resume is not the job seeker's."""
        resume = await self.resume_repo.get_by_id(db, resume_id)
        if not resume or resume.job_seeker_id != job_seeker_id:
            raise ResumeNotFoundException(
                f"Resume with id '{resume_id}' not found for jobSeeker {job_seeker_id}."
            )
        await self._set_default(db, job_seeker_id, resume_id)

    async def _set_default(self, db: AsyncSession, job_seeker_id: UUID, resume_id: int) -> None:
        await self.resume_repo.set_default(db, job_seeker_id, resume_id)
        await db.commit()
        logger.info("resume_default_set", resume_id=resume_id, job_seeker_id=str(job_seeker_id))

    async def presign_upload(self, db: AsyncSession, data: ResumeUploadRequest) -> ResumeUploadResponse:
        """Presigned POST for uploading the file straight to the bucket."""
        if not await self.job_seeker_repo.get_by_id(db, data.job_seeker_id):
            raise JobSeekerNotFoundException(f"JobSeeker with id '{data.job_seeker_id}' not found.")

        key = storage.build_resume_key(str(data.job_seeker_id), data.filename)
        presigned = await storage.generate_presign_upload(
            key,
            storage.RESUME_CONTENT_TYPES[data.file_type],
            settings.max_resume_size_bytes,
        )
        logger.info("resume_upload_presigned", job_seeker_id=str(data.job_seeker_id), key=key)
        return ResumeUploadResponse(
            url=presigned["url"],
            fields=presigned["fields"],
            file_path=key,
            max_size_bytes=settings.max_resume_size_bytes,
        )

    async def count(self, db: AsyncSession) -> int:
        return await self.resume_repo.count(db)
