"""
Notification service - in-app notifications with optional email.

Email delivery is attempted inline when a notification asks for it. A
failed send never fails the request: the row stays with
``sent_email=False`` and the periodic sweep (``retry_unsent_emails``)
tries again later.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.core import email_templates
from hirehub.core.config import settings
from hirehub.core.email import EmailSender
from hirehub.core.exceptions import (
    ApplicationNotFoundException,
    ForbiddenException,
    NotificationNotFoundException,
    UserNotFoundException,
)
from hirehub.core.logging import get_logger
from hirehub.models.notification import Notification
from hirehub.repositories.application_repository import ApplicationRepository
from hirehub.repositories.notification_repository import NotificationRepository
from hirehub.repositories.user_repository import UserRepository
from hirehub.schemas.notification import (
    NotificationCreate,
    NotificationResponse,
    NotificationUpdate,
    NotifyApplicantRequest,
)

logger = get_logger(__name__)

DEFAULT_SUBJECT = "Notification from HireHub"
APPLICANT_MESSAGE_SUBJECT = "Message from employer"
MESSAGE_MAX_LENGTH = 300
SUBJECT_MAX_LENGTH = 100


def clip(text: Optional[str], limit: int) -> Optional[str]:
    """Trim generated text to a column limit."""
    if text is None or len(text) <= limit:
        return text
    return text[: limit - 3].rstrip() + "..."


def to_notification_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        id=notification.id,
        user_id=notification.user_id,
        message=notification.message,
        subject=notification.subject,
        is_read=notification.is_read,
        sent_email=notification.sent_email,
        created_at=notification.created_at,
        user_email=notification.user.email if notification.user else "",
    )


class NotificationService:
    """Creates, reads and delivers notifications."""

    def __init__(self):
        self.notification_repo = NotificationRepository()
        self.application_repo = ApplicationRepository()
        self.user_repo = UserRepository()

    # ── Reads ────────────────────────────────────────────────────────────────

    async def get_by_user(self, db: AsyncSession, user_id: UUID) -> List[NotificationResponse]:
        return [to_notification_response(n) for n in await self.notification_repo.get_by_user(db, user_id)]

    async def get_unread_by_user(self, db: AsyncSession, user_id: UUID) -> List[NotificationResponse]:
        notifications = await self.notification_repo.get_unread_by_user(db, user_id)
        return [to_notification_response(n) for n in notifications]

    async def get_recent_by_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        limit: Optional[int] = None,
    ) -> List[NotificationResponse]:
        limit = limit or settings.recent_notifications_limit
        notifications = await self.notification_repo.get_recent_by_user(db, user_id, limit)
        return [to_notification_response(n) for n in notifications]

    async def get_by_id(self, db: AsyncSession, notification_id: int) -> NotificationResponse:
        return to_notification_response(await self._get_or_raise(db, notification_id))

    async def get_unsent_email_notifications(
        self,
        db: AsyncSession,
        limit: Optional[int] = None,
    ) -> List[NotificationResponse]:
        limit = limit or settings.unsent_email_batch_size
        return [to_notification_response(n) for n in await self.notification_repo.get_unsent_emails(db, limit)]

    async def count(self, db: AsyncSession) -> int:
        return await self.notification_repo.count(db)

    # ── Writes ───────────────────────────────────────────────────────────────

    async def create(
        self,
        db: AsyncSession,
        data: NotificationCreate,
        email_sender: EmailSender,
    ) -> NotificationResponse:
        """
        Persist the notification, then try the email if one was requested.

        Raises:
            UserNotFoundException: If the recipient does not exist.
        """
        if not await self.user_repo.get_by_id(db, data.user_id):
            raise UserNotFoundException(data.user_id)

        notification = await self.notification_repo.create(
            db,
            user_id=data.user_id,
            message=data.message,
            subject=data.subject,
            is_read=False,
            email_requested=data.send_email,
            sent_email=False,
        )
        await db.commit()
        logger.info(
            "notification_created",
            notification_id=notification.id,
            user_id=str(data.user_id),
            send_email=data.send_email,
        )

        if data.send_email:
            await self._deliver(
                db,
                notification,
                email_sender,
                subject=data.subject or DEFAULT_SUBJECT,
                html_body=email_templates.plain_message(data.message),
            )
            notification = await self.notification_repo.get_by_id(db, notification.id)

        return to_notification_response(notification)

    async def update(
        self,
        db: AsyncSession,
        notification_id: int,
        data: NotificationUpdate,
    ) -> NotificationResponse:
        """Sets the read flag; a blank message keeps the current one."""
        notification = await self._get_or_raise(db, notification_id)

        changes = {"is_read": data.is_read}
        if data.message and data.message.strip():
            changes["message"] = data.message
        notification = await self.notification_repo.update(db, notification, **changes)
        await db.commit()
        return to_notification_response(notification)

    async def mark_as_read(self, db: AsyncSession, notification_id: int) -> bool:
        notification = await self.notification_repo.get_by_id(db, notification_id)
        if not notification:
            return False
        notification.is_read = True
        await db.commit()
        return True

    async def mark_all_as_read(self, db: AsyncSession, user_id: UUID) -> int:
        updated = await self.notification_repo.mark_all_as_read(db, user_id)
        await db.commit()
        logger.info("notifications_marked_read", user_id=str(user_id), count=updated)
        return updated

    async def delete(self, db: AsyncSession, notification_id: int) -> None:
        if not await self.notification_repo.delete(db, notification_id):
            raise NotificationNotFoundException(notification_id)
        await db.commit()

    async def notify_applicant(
        self,
        db: AsyncSession,
        data: NotifyApplicantRequest,
        employer_user_id: UUID,
        email_sender: EmailSender,
    ) -> NotificationResponse:
        """
        Message the applicant behind an application on the employer's behalf.

        Raises:
            ApplicationNotFoundException: If the application does not exist.
            ForbiddenException: If the caller does not own the job applied to.
        """
        application = await self.application_repo.get_by_id(db, data.application_id)
        if not application:
            raise ApplicationNotFoundException(data.application_id)

        employer = application.job.employer
        if employer.user_id != employer_user_id:
            raise ForbiddenException("Not authorized to message this applicant.")

        applicant = application.job_seeker.user
        body = None
        if data.send_email:
            if data.subject and "interview" in data.subject.lower():
                body = email_templates.interview_scheduled(
                    applicant.full_name,
                    application.job.title,
                    employer.company_name,
                    application.interview_date,
                )
            else:
                body = email_templates.shortlisted(
                    applicant.full_name,
                    application.job.title,
                    employer.company_name,
                )

        notification = await self.notification_repo.create(
            db,
            user_id=applicant.id,
            message=data.message,
            subject=data.subject or APPLICANT_MESSAGE_SUBJECT,
            is_read=False,
            email_requested=data.send_email,
            sent_email=False,
            email_body=body,
        )
        await db.commit()
        logger.info(
            "applicant_notified",
            notification_id=notification.id,
            application_id=application.id,
        )

        if body is not None:
            await self._deliver(
                db,
                notification,
                email_sender,
                subject=notification.subject,
                html_body=body,
            )
            notification = await self.notification_repo.get_by_id(db, notification.id)

        return to_notification_response(notification)

    async def retry_unsent_emails(
        self,
        db: AsyncSession,
        email_sender: EmailSender,
        limit: Optional[int] = None,
    ) -> dict:
        """
        Sweep over notifications whose requested email never went out.

        Templated emails are re-sent from their stored HTML; plain
        notifications are rendered again from the message.
        """
        limit = limit or settings.unsent_email_batch_size
        pending = await self.notification_repo.get_unsent_emails(db, limit)

        sent = 0
        for notification in pending:
            delivered = await self._deliver(
                db,
                notification,
                email_sender,
                subject=notification.subject or DEFAULT_SUBJECT,
                html_body=notification.email_body or email_templates.plain_message(notification.message),
            )
            if delivered:
                sent += 1

        logger.info("unsent_email_sweep_completed", attempted=len(pending), sent=sent)
        return {"attempted": len(pending), "sent": sent}

    # ── Helpers ──────────────────────────────────────────────────────────────

    async def _get_or_raise(self, db: AsyncSession, notification_id: int) -> Notification:
        notification = await self.notification_repo.get_by_id(db, notification_id)
        if not notification:
            raise NotificationNotFoundException(notification_id)
        return notification

    async def _deliver(
        self,
        db: AsyncSession,
        notification: Notification,
        email_sender: EmailSender,
        *,
        subject: str,
        html_body: str,
    ) -> bool:
        """Send the email for a stored notification and record success."""
        recipient = notification.user.email if notification.user else None
        if not recipient:
            logger.warning("notification_without_recipient", notification_id=notification.id)
            return False

        if not await email_sender.send(recipient, subject, html_body):
            logger.warning("notification_email_not_sent", notification_id=notification.id)
            return False

        notification.sent_email = True
        await db.commit()
        return True
