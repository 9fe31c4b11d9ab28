"""
Employer service - company profiles owned by Employer users.
"""
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.core.exceptions import (
    EmployerNotFoundException,
    ProfileAlreadyExistsException,
    RoleMismatchException,
    UserNotFoundException,
)
from hirehub.core.logging import get_logger
from hirehub.models.employer import Employer
from hirehub.models.user import ROLE_EMPLOYER
from hirehub.repositories.employer_repository import EmployerRepository
from hirehub.repositories.user_repository import UserRepository
from hirehub.schemas.employer import EmployerCreate, EmployerResponse, EmployerUpdate

logger = get_logger(__name__)


def to_employer_response(employer: Employer) -> EmployerResponse:
    user = employer.user
    return EmployerResponse(
        id=employer.id,
        user_id=employer.user_id,
        company_name=employer.company_name,
        contact_info=employer.contact_info,
        position=employer.position,
        user_full_name=user.full_name if user else "",
        user_email=user.email if user else "",
    )


class EmployerService:
    def __init__(self):
        self.employer_repo = EmployerRepository()
        self.user_repo = UserRepository()

    async def get_all(self, db: AsyncSession) -> List[EmployerResponse]:
        employers = await self.employer_repo.get_all(db, order_by=Employer.company_name)
        return [to_employer_response(e) for e in employers]

    async def get_by_id(self, db: AsyncSession, employer_id: UUID) -> EmployerResponse:
        employer = await self.employer_repo.get_by_id(db, employer_id)
        if not employer:
            raise EmployerNotFoundException(f"Employer with id '{employer_id}' not found.")
        return to_employer_response(employer)

    async def get_by_user_id(self, db: AsyncSession, user_id: UUID) -> EmployerResponse:
        employer = await self.employer_repo.get_by_user_id(db, user_id)
        if not employer:
            raise EmployerNotFoundException(f"Employer for user '{user_id}' not found.")
        return to_employer_response(employer)

    async def get_by_job_id(self, db: AsyncSession, job_id: int) -> EmployerResponse:
        employer = await self.employer_repo.get_by_job_id(db, job_id)
        if not employer:
            raise EmployerNotFoundException(f"Employer for job '{job_id}' not found.")
        return to_employer_response(employer)

    async def search_by_company_name(self, db: AsyncSession, company_name: str) -> List[EmployerResponse]:
        employers = await self.employer_repo.search_by_company_name(db, company_name)
        return [to_employer_response(e) for e in employers]

    async def create(self, db: AsyncSession, data: EmployerCreate) -> EmployerResponse:
        """
        Raises:
            UserNotFoundException: If the owning user does not exist.
            RoleMismatchException: If the user is not an Employer.
            ProfileAlreadyExistsException: If the user already has an employer profile.
        """
        user = await self.user_repo.get_by_id(db, data.user_id)
        if not user:
            raise UserNotFoundException(data.user_id)
        if user.role != ROLE_EMPLOYER:
            raise RoleMismatchException(ROLE_EMPLOYER, user.role)
        if await self.employer_repo.get_by_user_id(db, data.user_id):
            raise ProfileAlreadyExistsException("Employer")

        employer = await self.employer_repo.create(
            db,
            user_id=data.user_id,
            company_name=data.company_name,
            contact_info=data.contact_info,
            position=data.position,
        )
        await db.commit()

        logger.info("employer_created", employer_id=str(employer.id), user_id=str(data.user_id))
        return to_employer_response(employer)

    async def update(
        self,
        db: AsyncSession,
        employer_id: UUID,
        data: EmployerUpdate,
    ) -> EmployerResponse:
        employer = await self.employer_repo.get_by_id(db, employer_id)
        if not employer:
            raise EmployerNotFoundException(f"Employer with id '{employer_id}' not found.")

        employer = await self.employer_repo.update(
            db,
            employer,
            company_name=data.company_name,
            contact_info=data.contact_info,
            position=data.position,
        )
        await db.commit()
        return to_employer_response(employer)

    async def delete(self, db: AsyncSession, employer_id: UUID) -> None:
        """Jobs and their applications go with the employer (database cascade)."""
        if not await self.employer_repo.delete(db, employer_id):
            raise EmployerNotFoundException(f"Employer with id '{employer_id}' not found.")
        await db.commit()
        logger.info("employer_deleted", employer_id=str(employer_id))

    async def count(self, db: AsyncSession) -> int:
        return await self.employer_repo.count(db)
