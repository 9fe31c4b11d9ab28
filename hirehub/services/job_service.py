"""
Job service - postings, keyword searches and per-employer listings.

Searches are single-column substring matches with the database's own
collation; there is no ranking or tokenisation.
"""
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.core.exceptions import EmployerNotFoundException, JobNotFoundException
from hirehub.core.logging import get_logger
from hirehub.models.base import utcnow
from hirehub.models.job import JOB_STATUS_OPEN, Job
from hirehub.repositories.employer_repository import EmployerRepository
from hirehub.repositories.job_repository import JobRepository
from hirehub.schemas.job import JobCreate, JobResponse, JobUpdate

logger = get_logger(__name__)


def to_job_response(job: Job) -> JobResponse:
    return JobResponse(
        id=job.id,
        employer_id=job.employer_id,
        title=job.title,
        description=job.description,
        location=job.location,
        salary=job.salary,
        skills_required=job.skills_required,
        academic_eligibility=job.academic_eligibility,
        allowed_batches=job.allowed_batches,
        backlogs=job.backlogs,
        status=job.status,
        created_at=job.created_at,
        employer_name=job.employer.company_name if job.employer else "",
    )


class JobService:
    """Handles job posting logic."""

    def __init__(self):
        self.job_repo = JobRepository()
        self.employer_repo = EmployerRepository()

    async def get_all(self, db: AsyncSession) -> List[JobResponse]:
        jobs = await self.job_repo.get_all(db, order_by=Job.id)
        return [to_job_response(j) for j in jobs]

    async def get_by_id(self, db: AsyncSession, job_id: int) -> JobResponse:
        job = await self.job_repo.get_by_id(db, job_id)
        if not job:
            raise JobNotFoundException(job_id)
        return to_job_response(job)

    async def get_by_employer(self, db: AsyncSession, employer_id: UUID) -> List[JobResponse]:
        return [to_job_response(j) for j in await self.job_repo.get_by_employer(db, employer_id)]

    async def search_by_title(self, db: AsyncSession, title: str) -> List[JobResponse]:
        return [to_job_response(j) for j in await self.job_repo.search_by_title(db, title)]

    async def search_by_location(self, db: AsyncSession, location: str) -> List[JobResponse]:
        return [to_job_response(j) for j in await self.job_repo.search_by_location(db, location)]

    async def search_by_skill(self, db: AsyncSession, skill: str) -> List[JobResponse]:
        return [to_job_response(j) for j in await self.job_repo.search_by_skill(db, skill)]

    async def search_by_company(self, db: AsyncSession, company_name: str) -> List[JobResponse]:
        return [to_job_response(j) for j in await self.job_repo.search_by_company(db, company_name)]

    async def create(self, db: AsyncSession, data: JobCreate) -> JobResponse:
        """New postings always start Open, whatever the caller sends."""
        if not await self.employer_repo.get_by_id(db, data.employer_id):
            raise EmployerNotFoundException(f"Employer with id '{data.employer_id}' not found.")

        job = await self.job_repo.create(
            db,
            employer_id=data.employer_id,
            title=data.title,
            description=data.description,
            location=data.location,
            salary=data.salary,
            skills_required=data.skills_required,
            academic_eligibility=data.academic_eligibility,
            allowed_batches=data.allowed_batches,
            backlogs=data.backlogs,
            status=JOB_STATUS_OPEN,
            created_at=utcnow(),
        )
        await db.commit()

        logger.info("job_created", job_id=job.id, employer_id=str(data.employer_id))
        return to_job_response(job)

    async def update(self, db: AsyncSession, job_id: int, data: JobUpdate) -> JobResponse:
        job = await self.job_repo.get_by_id(db, job_id)
        if not job:
            raise JobNotFoundException(job_id)

        job = await self.job_repo.update(
            db,
            job,
            title=data.title,
            description=data.description,
            location=data.location,
            salary=data.salary,
            skills_required=data.skills_required,
            academic_eligibility=data.academic_eligibility,
            allowed_batches=data.allowed_batches,
            backlogs=data.backlogs,
            status=data.status,
        )
        await db.commit()
        return to_job_response(job)

    async def delete(self, db: AsyncSession, job_id: int) -> None:
        if not await self.job_repo.delete(db, job_id):
            raise JobNotFoundException(job_id)
        await db.commit()
        logger.info("job_deleted", job_id=job_id)

    async def count(self, db: AsyncSession) -> int:
        return await self.job_repo.count(db)
