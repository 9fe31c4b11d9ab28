"""
Employer profile routes.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.api.deps import ensure_owner_or_admin, get_current_user, require_roles
from hirehub.core.database import get_db
from hirehub.models.user import ROLE_ADMIN, ROLE_EMPLOYER, User
from hirehub.schemas.employer import EmployerCreate, EmployerResponse, EmployerUpdate
from hirehub.services.employer_service import EmployerService

router = APIRouter(prefix="/employers", tags=["employers"])

employer_service = EmployerService()

admin_or_employer = require_roles(ROLE_ADMIN, ROLE_EMPLOYER)


@router.get("", response_model=List[EmployerResponse])
async def list_employers(
    current_user: User = Depends(require_roles(ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    return await employer_service.get_all(db)


@router.get("/search", response_model=List[EmployerResponse])
async def search_employers(
    company_name: str = Query(..., min_length=1),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await employer_service.search_by_company_name(db, company_name)


@router.get("/by-user/{user_id}", response_model=EmployerResponse)
async def get_employer_by_user(
    user_id: uuid.UUID,
    current_user: User = Depends(admin_or_employer),
    db: AsyncSession = Depends(get_db),
):
    return await employer_service.get_by_user_id(db, user_id)


@router.get("/by-job/{job_id}", response_model=EmployerResponse)
async def get_employer_by_job(
    job_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await employer_service.get_by_job_id(db, job_id)


@router.get("/{employer_id}", response_model=EmployerResponse)
async def get_employer(
    employer_id: uuid.UUID,
    current_user: User = Depends(require_roles(ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    return await employer_service.get_by_id(db, employer_id)


@router.post("", response_model=EmployerResponse, status_code=status.HTTP_201_CREATED)
async def create_employer(
    body: EmployerCreate,
    current_user: User = Depends(admin_or_employer),
    db: AsyncSession = Depends(get_db),
):
    ensure_owner_or_admin(current_user, body.user_id)
    return await employer_service.create(db, body)


@router.put("/{employer_id}", response_model=EmployerResponse)
async def update_employer(
    employer_id: uuid.UUID,
    body: EmployerUpdate,
    current_user: User = Depends(admin_or_employer),
    db: AsyncSession = Depends(get_db),
):
    existing = await employer_service.get_by_id(db, employer_id)
    ensure_owner_or_admin(current_user, existing.user_id)
    return await employer_service.update(db, employer_id, body)


@router.delete("/{employer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employer(
    employer_id: uuid.UUID,
    current_user: User = Depends(admin_or_employer),
    db: AsyncSession = Depends(get_db),
):
    existing = await employer_service.get_by_id(db, employer_id)
    ensure_owner_or_admin(current_user, existing.user_id)
    await employer_service.delete(db, employer_id)
