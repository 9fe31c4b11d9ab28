"""
Database models for HireHub.

Importing this package registers every table on ``Base.metadata``.
"""
from hirehub.models.base import CreatedAtMixin, IntIdMixin, UUIDMixin
from hirehub.models.user import User
from hirehub.models.employer import Employer
from hirehub.models.job_seeker import JobSeeker
from hirehub.models.job import Job
from hirehub.models.resume import Resume
from hirehub.models.application import Application
from hirehub.models.notification import Notification
from hirehub.models.password_reset import PasswordReset

__all__ = [
    "CreatedAtMixin",
    "IntIdMixin",
    "UUIDMixin",
    "User",
    "Employer",
    "JobSeeker",
    "Job",
    "Resume",
    "Application",
    "Notification",
    "PasswordReset",
]
