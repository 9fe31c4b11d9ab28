"""
Employer repository - data access for Employer entity.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hirehub.models.employer import Employer
from hirehub.models.job import Job
from hirehub.repositories.base import BaseRepository


class EmployerRepository(BaseRepository[Employer]):
    def __init__(self):
        super().__init__(Employer)

    def load_options(self) -> list:
        return [selectinload(Employer.user)]

    async def get_by_user_id(self, db: AsyncSession, user_id: UUID) -> Optional[Employer]:
        result = await db.execute(self._select().where(Employer.user_id == user_id))
        return result.scalars().first()

    async def get_by_job_id(self, db: AsyncSession, job_id: int) -> Optional[Employer]:
        """The employer that published a job."""
        query = self._select().join(Job, Job.employer_id == Employer.id).where(Job.id == job_id)
        result = await db.execute(query)
        return result.scalars().first()

    async def search_by_company_name(self, db: AsyncSession, company_name: str) -> List[Employer]:
        query = self._select().where(Employer.company_name.contains(company_name, autoescape=True))
        return await self._all(db, query.order_by(Employer.company_name))
