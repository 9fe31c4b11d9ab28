"""
Application repository - data access for Application entity.
"""
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hirehub.models.application import Application
from hirehub.models.job import Job
from hirehub.models.job_seeker import JobSeeker
from hirehub.repositories.base import BaseRepository


class ApplicationRepository(BaseRepository[Application]):
    def __init__(self):
        super().__init__(Application)

    def load_options(self) -> list:
        # Job -> Employer gives the employer name and user for notifications;
        # JobSeeker -> User gives the applicant name and email.
        return [
            selectinload(Application.job).selectinload(Job.employer),
            selectinload(Application.job_seeker).selectinload(JobSeeker.user),
        ]

    async def get_by_job(self, db: AsyncSession, job_id: int) -> List[Application]:
        query = self._select().where(Application.job_id == job_id)
        return await self._all(db, query.order_by(Application.applied_at.desc(), Application.id.desc()))

    async def get_by_job_seeker(self, db: AsyncSession, job_seeker_id: UUID) -> List[Application]:
        query = self._select().where(Application.job_seeker_id == job_seeker_id)
        return await self._all(db, query.order_by(Application.applied_at.desc(), Application.id.desc()))

    async def get_shortlisted_by_job(self, db: AsyncSession, job_id: int) -> List[Application]:
        query = self._select().where(
            Application.job_id == job_id,
            Application.is_shortlisted == True,
        )
        return await self._all(db, query.order_by(Application.id))

    async def get_with_interview_by_job(self, db: AsyncSession, job_id: int) -> List[Application]:
        query = self._select().where(
            Application.job_id == job_id,
            Application.interview_date.isnot(None),
        )
        return await self._all(db, query.order_by(Application.interview_date))
