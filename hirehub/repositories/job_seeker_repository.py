"""
JobSeeker repository - data access for JobSeeker entity.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import exists, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hirehub.models.application import Application
from hirehub.models.job_seeker import JobSeeker
from hirehub.models.resume import Resume
from hirehub.repositories.base import BaseRepository


class JobSeekerRepository(BaseRepository[JobSeeker]):
    def __init__(self):
        super().__init__(JobSeeker)

    def load_options(self) -> list:
        return [selectinload(JobSeeker.user)]

    async def get_by_user_id(self, db: AsyncSession, user_id: UUID) -> Optional[JobSeeker]:
        result = await db.execute(self._select().where(JobSeeker.user_id == user_id))
        return result.scalars().first()

    async def search_by_college(self, db: AsyncSession, college: str) -> List[JobSeeker]:
        query = self._select().where(JobSeeker.college.contains(college, autoescape=True))
        return await self._all(db, query.order_by(JobSeeker.id))

    async def search_by_skill(self, db: AsyncSession, skill: str) -> List[JobSeeker]:
        query = self._select().where(JobSeeker.skills.contains(skill, autoescape=True))
        return await self._all(db, query.order_by(JobSeeker.id))

    async def has_dependents(self, db: AsyncSession, job_seeker_id: UUID) -> bool:
        """True when any resume or application still points at the job seeker."""
        result = await db.execute(
            select(
                or_(
                    exists().where(Resume.job_seeker_id == job_seeker_id),
                    exists().where(Application.job_seeker_id == job_seeker_id),
                )
            )
        )
        return bool(result.scalar())
