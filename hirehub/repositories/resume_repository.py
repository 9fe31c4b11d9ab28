"""
Resume repository - data access for Resume entity.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hirehub.models.application import Application
from hirehub.models.job_seeker import JobSeeker
from hirehub.models.resume import Resume
from hirehub.repositories.base import BaseRepository


class ResumeRepository(BaseRepository[Resume]):
    def __init__(self):
        super().__init__(Resume)

    def load_options(self) -> list:
        return [selectinload(Resume.job_seeker).selectinload(JobSeeker.user)]

    async def get_by_job_seeker(self, db: AsyncSession, job_seeker_id: UUID) -> List[Resume]:
        query = self._select().where(Resume.job_seeker_id == job_seeker_id)
        return await self._all(db, query.order_by(Resume.id))

    async def get_default(self, db: AsyncSession, job_seeker_id: UUID) -> Optional[Resume]:
        query = self._select().where(
            Resume.job_seeker_id == job_seeker_id,
            Resume.is_default == True,
        )
        result = await db.execute(query.order_by(Resume.id))
        return result.scalars().first()

    async def name_exists(
        self,
        db: AsyncSession,
        job_seeker_id: UUID,
        resume_name: str,
        exclude_id: Optional[int] = None,
    ) -> bool:
        """Whether the job seeker already has a resume with this name."""
        query = select(Resume.id).where(
            Resume.job_seeker_id == job_seeker_id,
            Resume.resume_name == resume_name,
        )
        if exclude_id is not None:
            query = query.where(Resume.id != exclude_id)
        result = await db.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def is_referenced(self, db: AsyncSession, resume_id: int) -> bool:
        """True when an application was submitted with this resume."""
        result = await db.execute(select(exists().where(Application.resume_id == resume_id)))
        return bool(result.scalar())

    async def set_default(self, db: AsyncSession, job_seeker_id: UUID, resume_id: int) -> None:
        """
        Rewrite ``is_default`` on every resume of the job seeker so only
        ``resume_id`` keeps it. Read-then-write without a lock: two
        concurrent calls for the same job seeker can interleave.
        """
        result = await db.execute(select(Resume).where(Resume.job_seeker_id == job_seeker_id))
        for resume in result.scalars().all():
            resume.is_default = resume.id == resume_id
        await db.flush()
