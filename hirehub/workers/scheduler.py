"""
Celery Beat scheduler configuration.

Periodic tasks:
- Retry notification emails that were requested but never delivered
- Purge accounts whose scheduled deletion date has passed
"""
import asyncio

from celery.schedules import crontab

from hirehub.core.database import async_session_maker, engine
from hirehub.core.email import get_email_sender
from hirehub.core.logging import get_logger
from hirehub.workers.celery_app import celery_app

logger = get_logger(__name__)


def run_async(coro):
    """Run a coroutine to completion from a synchronous Celery task."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


# ─── Periodic Task Schedule ────────────────────────────────────

celery_app.conf.beat_schedule = {
    "retry-unsent-email-notifications": {
        "task": "hirehub.workers.scheduler.retry_unsent_email_notifications",
        "schedule": crontab(minute="*/10"),
    },
    "purge-scheduled-deletions": {
        "task": "hirehub.workers.scheduler.purge_scheduled_deletions",
        "schedule": crontab(hour=3, minute=0),
    },
}


# ─── Scheduled Tasks ──────────────────────────────────────────

@celery_app.task
def retry_unsent_email_notifications():
    """Re-send notification emails that failed on the request path."""
    return run_async(_retry_unsent_email_notifications())


async def _retry_unsent_email_notifications():
    from hirehub.services.notification_service import NotificationService

    try:
        async with async_session_maker() as db:
            return await NotificationService().retry_unsent_emails(db, get_email_sender())
    finally:
        # pooled connections are bound to this task's event loop
        await engine.dispose()


@celery_app.task
def purge_scheduled_deletions():
    """Permanently delete accounts past their deletion date."""
    return run_async(_purge_scheduled_deletions())


async def _purge_scheduled_deletions():
    from hirehub.services.user_service import UserService

    try:
        async with async_session_maker() as db:
            purged = await UserService().purge_scheduled_deletions(db)
    finally:
        await engine.dispose()

    logger.info("purge_task_completed", purged=purged)
    return {"purged": purged}
