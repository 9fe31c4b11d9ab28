"""
Workers package - Celery app and periodic housekeeping tasks.
"""
from hirehub.workers.celery_app import celery_app
from hirehub.workers.scheduler import (
    purge_scheduled_deletions,
    retry_unsent_email_notifications,
)

__all__ = [
    "celery_app",
    "purge_scheduled_deletions",
    "retry_unsent_email_notifications",
]
