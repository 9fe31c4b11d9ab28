"""
Admin routes - dashboard totals and moderation listings.

Every route requires the Admin role.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.api.deps import require_roles
from hirehub.core.database import get_db
from hirehub.models.user import ROLE_ADMIN
from hirehub.schemas.admin import StatsResponse
from hirehub.schemas.application import ApplicationResponse
from hirehub.schemas.job import JobResponse
from hirehub.schemas.user import UserResponse
from hirehub.services.admin_service import AdminService

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_roles(ROLE_ADMIN))],
)

admin_service = AdminService()


@router.get("/stats", response_model=StatsResponse)
async def get_stats(db: AsyncSession = Depends(get_db)):
    return await admin_service.stats(db)


@router.get("/users", response_model=List[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    return await admin_service.user_service.get_all(db)


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return await admin_service.user_service.get_by_id(db, user_id)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    await admin_service.user_service.delete(db, user_id)


@router.get("/jobs", response_model=List[JobResponse])
async def list_jobs(db: AsyncSession = Depends(get_db)):
    return await admin_service.job_service.get_all(db)


@router.delete("/jobs/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(job_id: int, db: AsyncSession = Depends(get_db)):
    await admin_service.job_service.delete(db, job_id)


@router.get("/applications", response_model=List[ApplicationResponse])
async def list_applications(db: AsyncSession = Depends(get_db)):
    return await admin_service.application_service.get_all(db)


@router.delete("/applications/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_application(application_id: int, db: AsyncSession = Depends(get_db)):
    await admin_service.application_service.delete(db, application_id)
