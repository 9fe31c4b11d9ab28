"""
Notification routes.

Users read and acknowledge their own notifications. Admins create and
delete arbitrary ones; employers message the applicants of their jobs.
"""
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.api.deps import ensure_owner_or_admin, get_current_user, require_roles
from hirehub.core.database import get_db
from hirehub.core.email import EmailSender, get_email_sender
from hirehub.core.exceptions import NotificationNotFoundException
from hirehub.models.user import ROLE_ADMIN, ROLE_EMPLOYER, User
from hirehub.schemas.base import MessageResponse
from hirehub.schemas.notification import (
    MarkAllReadResponse,
    NotificationCreate,
    NotificationResponse,
    NotificationUpdate,
    NotifyApplicantRequest,
)
from hirehub.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])

notification_service = NotificationService()


@router.get("/user/{user_id}", response_model=List[NotificationResponse])
async def list_for_user(
    user_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    ensure_owner_or_admin(current_user, user_id)
    return await notification_service.get_by_user(db, user_id)


@router.get("/user/{user_id}/unread", response_model=List[NotificationResponse])
async def list_unread_for_user(
    user_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    ensure_owner_or_admin(current_user, user_id)
    return await notification_service.get_unread_by_user(db, user_id)


@router.get("/user/{user_id}/recent", response_model=List[NotificationResponse])
async def list_recent_for_user(
    user_id: uuid.UUID,
    limit: Optional[int] = Query(None, ge=1, le=100),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    ensure_owner_or_admin(current_user, user_id)
    return await notification_service.get_recent_by_user(db, user_id, limit)


@router.post("/user/{user_id}/mark-all-read", response_model=MarkAllReadResponse)
async def mark_all_read(
    user_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    ensure_owner_or_admin(current_user, user_id)
    updated = await notification_service.mark_all_as_read(db, user_id)
    return MarkAllReadResponse(updated=updated)


@router.post("/application/message", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def message_applicant(
    body: NotifyApplicantRequest,
    current_user: User = Depends(require_roles(ROLE_EMPLOYER)),
    db: AsyncSession = Depends(get_db),
    email_sender: EmailSender = Depends(get_email_sender),
):
    return await notification_service.notify_applicant(db, body, current_user.id, email_sender)


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    body: NotificationCreate,
    current_user: User = Depends(require_roles(ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
    email_sender: EmailSender = Depends(get_email_sender),
):
    return await notification_service.create(db, body, email_sender)


@router.get("/{notification_id}", response_model=NotificationResponse)
async def get_notification(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    notification = await notification_service.get_by_id(db, notification_id)
    ensure_owner_or_admin(current_user, notification.user_id)
    return notification


@router.put("/{notification_id}", response_model=NotificationResponse)
async def update_notification(
    notification_id: int,
    body: NotificationUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    existing = await notification_service.get_by_id(db, notification_id)
    ensure_owner_or_admin(current_user, existing.user_id)
    return await notification_service.update(db, notification_id, body)


@router.post("/{notification_id}/mark-read", response_model=MessageResponse)
async def mark_read(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    existing = await notification_service.get_by_id(db, notification_id)
    ensure_owner_or_admin(current_user, existing.user_id)
    if not await notification_service.mark_as_read(db, notification_id):
        raise NotificationNotFoundException(notification_id)
    return MessageResponse(message="Notification marked as read.")


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: int,
    current_user: User = Depends(require_roles(ROLE_ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    await notification_service.delete(db, notification_id)
