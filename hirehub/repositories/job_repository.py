"""
Job repository - data access for Job entity.
"""
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hirehub.models.employer import Employer
from hirehub.models.job import Job
from hirehub.repositories.base import BaseRepository


class JobRepository(BaseRepository[Job]):
    def __init__(self):
        super().__init__(Job)

    def load_options(self) -> list:
        return [selectinload(Job.employer)]

    async def get_by_employer(self, db: AsyncSession, employer_id: UUID) -> List[Job]:
        query = self._select().where(Job.employer_id == employer_id)
        return await self._all(db, query.order_by(Job.created_at.desc(), Job.id.desc()))

    async def search_by_title(self, db: AsyncSession, title: str) -> List[Job]:
        query = self._select().where(Job.title.contains(title, autoescape=True))
        return await self._all(db, query.order_by(Job.id))

    async def search_by_location(self, db: AsyncSession, location: str) -> List[Job]:
        query = self._select().where(Job.location.contains(location, autoescape=True))
        return await self._all(db, query.order_by(Job.id))

    async def search_by_skill(self, db: AsyncSession, skill: str) -> List[Job]:
        query = self._select().where(Job.skills_required.contains(skill, autoescape=True))
        return await self._all(db, query.order_by(Job.id))

    async def search_by_company(self, db: AsyncSession, company_name: str) -> List[Job]:
        query = (
            self._select()
            .join(Employer, Job.employer_id == Employer.id)
            .where(Employer.company_name.contains(company_name, autoescape=True))
        )
        return await self._all(db, query.order_by(Job.id))
