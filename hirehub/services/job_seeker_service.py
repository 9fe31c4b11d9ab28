"""
JobSeeker service - candidate profiles owned by JobSeeker users.

Deleting a profile is refused while resumes or applications still point at
it; callers remove those first.
"""
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.core.exceptions import (
    JobSeekerHasDependentsException,
    JobSeekerNotFoundException,
    ProfileAlreadyExistsException,
    RoleMismatchException,
    UserNotFoundException,
)
from hirehub.core.logging import get_logger
from hirehub.models.job_seeker import JobSeeker
from hirehub.models.user import ROLE_JOB_SEEKER
from hirehub.repositories.job_seeker_repository import JobSeekerRepository
from hirehub.repositories.user_repository import UserRepository
from hirehub.schemas.job_seeker import JobSeekerCreate, JobSeekerResponse, JobSeekerUpdate

logger = get_logger(__name__)


def to_job_seeker_response(job_seeker: JobSeeker) -> JobSeekerResponse:
    user = job_seeker.user
    return JobSeekerResponse(
        id=job_seeker.id,
        user_id=job_seeker.user_id,
        user_full_name=user.full_name if user else "",
        user_email=user.email if user else "",
        education_details=job_seeker.education_details,
        skills=job_seeker.skills,
        college=job_seeker.college,
        work_status=job_seeker.work_status,
        experience=job_seeker.experience,
    )


class JobSeekerService:
    def __init__(self):
        self.job_seeker_repo = JobSeekerRepository()
        self.user_repo = UserRepository()

    async def get_all(self, db: AsyncSession) -> List[JobSeekerResponse]:
        return [to_job_seeker_response(js) for js in await self.job_seeker_repo.get_all(db)]

    async def get_by_id(self, db: AsyncSession, job_seeker_id: UUID) -> JobSeekerResponse:
        job_seeker = await self.job_seeker_repo.get_by_id(db, job_seeker_id)
        if not job_seeker:
            raise JobSeekerNotFoundException(f"JobSeeker with id '{job_seeker_id}' not found.")
        return to_job_seeker_response(job_seeker)

    async def get_by_user_id(self, db: AsyncSession, user_id: UUID) -> JobSeekerResponse:
        job_seeker = await self.job_seeker_repo.get_by_user_id(db, user_id)
        if not job_seeker:
            raise JobSeekerNotFoundException(f"JobSeeker for user '{user_id}' not found.")
        return to_job_seeker_response(job_seeker)

    async def search_by_college(self, db: AsyncSession, college: str) -> List[JobSeekerResponse]:
        return [to_job_seeker_response(js) for js in await self.job_seeker_repo.search_by_college(db, college)]

    async def search_by_skill(self, db: AsyncSession, skill: str) -> List[JobSeekerResponse]:
        return [to_job_seeker_response(js) for js in await self.job_seeker_repo.search_by_skill(db, skill)]

    async def create(self, db: AsyncSession, data: JobSeekerCreate) -> JobSeekerResponse:
        user = await self.user_repo.get_by_id(db, data.user_id)
        if not user:
            raise UserNotFoundException(data.user_id)
        if user.role != ROLE_JOB_SEEKER:
            raise RoleMismatchException(ROLE_JOB_SEEKER, user.role)
        if await self.job_seeker_repo.get_by_user_id(db, data.user_id):
            raise ProfileAlreadyExistsException("JobSeeker")

        job_seeker = await self.job_seeker_repo.create(
            db,
            user_id=data.user_id,
            education_details=data.education_details,
            skills=data.skills,
            college=data.college,
            work_status=data.work_status,
            experience=data.experience,
        )
        await db.commit()

        logger.info("job_seeker_created", job_seeker_id=str(job_seeker.id), user_id=str(data.user_id))
        return to_job_seeker_response(job_seeker)

    async def update(
        self,
        db: AsyncSession,
        job_seeker_id: UUID,
        data: JobSeekerUpdate,
    ) -> JobSeekerResponse:
        job_seeker = await self.job_seeker_repo.get_by_id(db, job_seeker_id)
        if not job_seeker:
            raise JobSeekerNotFoundException(f"JobSeeker with id '{job_seeker_id}' not found.")

        job_seeker = await self.job_seeker_repo.update(
            db,
            job_seeker,
            education_details=data.education_details,
            skills=data.skills,
            college=data.college,
            work_status=data.work_status,
            experience=data.experience,
        )
        await db.commit()
        return to_job_seeker_response(job_seeker)

    async def delete(self, db: AsyncSession, job_seeker_id: UUID) -> None:
        """
        Raises:
            JobSeekerNotFoundException: If the profile does not exist.
            JobSeekerHasDependentsException: If resumes or applications remain.
        """
        if not await self.job_seeker_repo.get_by_id(db, job_seeker_id):
            raise JobSeekerNotFoundException(f"JobSeeker with id '{job_seeker_id}' not found.")
        if await self.job_seeker_repo.has_dependents(db, job_seeker_id):
            logger.info("job_seeker_delete_blocked", job_seeker_id=str(job_seeker_id))
            raise JobSeekerHasDependentsException()

        await self.job_seeker_repo.delete(db, job_seeker_id)
        await db.commit()
        logger.info("job_seeker_deleted", job_seeker_id=str(job_seeker_id))

    async def count(self, db: AsyncSession) -> int:
        return await self.job_seeker_repo.count(db)
