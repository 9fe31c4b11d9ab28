"""
Admin service - dashboard totals.

Each total comes from the owning service's own ``count``; listing and
deletion for the admin screens reuse the entity services directly.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.schemas.admin import StatsResponse
from hirehub.services.application_service import ApplicationService
from hirehub.services.employer_service import EmployerService
from hirehub.services.job_seeker_service import JobSeekerService
from hirehub.services.job_service import JobService
from hirehub.services.user_service import UserService


class AdminService:
    def __init__(self):
        self.user_service = UserService()
        self.job_service = JobService()
        self.application_service = ApplicationService()
        self.employer_service = EmployerService()
        self.job_seeker_service = JobSeekerService()

    async def stats(self, db: AsyncSession) -> StatsResponse:
        return StatsResponse(
            total_users=await self.user_service.count(db),
            total_jobs=await self.job_service.count(db),
            total_applications=await self.application_service.count(db),
            total_employers=await self.employer_service.count(db),
            total_job_seekers=await self.job_seeker_service.count(db),
        )
