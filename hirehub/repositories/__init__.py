"""
Repository layer - data access abstraction.

Repositories handle all database queries, keeping SQL/ORM logic
out of the service and route layers.
"""
from hirehub.repositories.base import BaseRepository
from hirehub.repositories.user_repository import UserRepository
from hirehub.repositories.employer_repository import EmployerRepository
from hirehub.repositories.job_seeker_repository import JobSeekerRepository
from hirehub.repositories.job_repository import JobRepository
from hirehub.repositories.resume_repository import ResumeRepository
from hirehub.repositories.application_repository import ApplicationRepository
from hirehub.repositories.notification_repository import NotificationRepository
from hirehub.repositories.password_reset_repository import PasswordResetRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "EmployerRepository",
    "JobSeekerRepository",
    "JobRepository",
    "ResumeRepository",
    "ApplicationRepository",
    "NotificationRepository",
    "PasswordResetRepository",
]
