"""
User routes.

Thin controllers - all business logic lives in UserService.
Self-service lifecycle routes accept the account owner or an admin.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.api.deps import (
    ensure_owner_or_admin,
    get_current_user,
    get_token_user,
    is_admin,
    require_roles,
)
from hirehub.core.database import get_db
from hirehub.core.exceptions import ForbiddenException, NotFoundException
from hirehub.models.user import ROLE_ADMIN, User
from hirehub.schemas.base import MessageResponse
from hirehub.schemas.user import UserResponse, UserUpdate
from hirehub.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

user_service = UserService()


@router.get("", response_model=List[UserResponse])
async def list_users(
    current_user: User = Depends(require_roles(ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    return await user_service.get_all(db)


@router.get("/by-role/{role}", response_model=List[UserResponse])
async def list_users_by_role(
    role: str,
    current_user: User = Depends(require_roles(ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    return await user_service.get_by_role(db, role)


@router.get("/search", response_model=List[UserResponse])
async def search_users(
    name: str = Query(..., min_length=1),
    current_user: User = Depends(require_roles(ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    return await user_service.search_by_name(db, name)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await user_service.get_by_id(db, user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: uuid.UUID,
    body: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Owners may edit their profile but only an admin may change a role."""
    ensure_owner_or_admin(current_user, user_id)
    if not is_admin(current_user) and body.role != current_user.role:
        raise ForbiddenException("Only an admin can change a user's role")
    return await user_service.update(db, user_id, body)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    ensure_owner_or_admin(current_user, user_id)
    await user_service.delete(db, user_id)


# ── Account lifecycle ───────────────────────────────────────────────────────

@router.post("/{user_id}/schedule-deletion", response_model=MessageResponse)
async def schedule_deletion(
    user_id: uuid.UUID,
    days: int = Query(30),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Deactivate now, delete permanently after ``days`` days (default 30)."""
    ensure_owner_or_admin(current_user, user_id)
    due = await user_service.schedule_deletion(db, user_id, days)
    return MessageResponse(message=f"Account scheduled for permanent deletion on {due.date().isoformat()}.")


@router.post("/{user_id}/deactivate", response_model=MessageResponse)
async def deactivate(
    user_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    ensure_owner_or_admin(current_user, user_id)
    if not await user_service.deactivate(db, user_id):
        raise NotFoundException("User not found or already deactivated")
    return MessageResponse(message="Account deactivated successfully.")


@router.post("/{user_id}/reactivate", response_model=MessageResponse)
async def reactivate(
    user_id: uuid.UUID,
    current_user: User = Depends(get_token_user),
    db: AsyncSession = Depends(get_db),
):
    """A deactivated owner may still reactivate with a token issued before deactivation."""
    if current_user.id != user_id and not (current_user.is_active and is_admin(current_user)):
        raise ForbiddenException("Not allowed to act on another user's account")
    if not await user_service.reactivate(db, user_id):
        raise NotFoundException("User not found or already active")
    return MessageResponse(message="Account reactivated successfully.")


@router.delete("/{user_id}/delete-permanently", response_model=MessageResponse)
async def delete_permanently(
    user_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    ensure_owner_or_admin(current_user, user_id)
    if not await user_service.delete_permanently(db, user_id):
        raise NotFoundException("User not found")
    return MessageResponse(message="Account permanently deleted")
