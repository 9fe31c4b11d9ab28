"""
Notification schemas.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from hirehub.schemas.base import BaseSchema


class NotificationCreate(BaseSchema):
    user_id: UUID
    message: str = Field(..., min_length=1, max_length=300)
    subject: Optional[str] = Field(None, max_length=100)
    send_email: bool = False


class NotificationUpdate(BaseSchema):
    is_read: bool = False
    # Blank keeps the current message
    message: Optional[str] = Field(None, max_length=300)


class NotifyApplicantRequest(BaseSchema):
    """Employer-to-applicant message about one application."""

    application_id: int
    message: str = Field(..., min_length=1, max_length=300)
    subject: Optional[str] = Field(None, max_length=100)
    send_email: bool = True


class NotificationResponse(BaseSchema):
    id: int
    user_id: UUID
    message: str
    subject: Optional[str] = None
    is_read: bool
    sent_email: bool
    created_at: datetime
    user_email: str = ""


class MarkAllReadResponse(BaseSchema):
    updated: int
