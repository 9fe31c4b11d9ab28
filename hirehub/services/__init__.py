"""
Service layer - business logic and orchestration.

Services contain the application's business logic, coordinate between
repositories, and own the transaction boundary (repositories flush,
services commit). Every method takes the request's AsyncSession.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from hirehub.services.auth_service import AuthService
from hirehub.services.user_service import UserService
from hirehub.services.employer_service import EmployerService
from hirehub.services.job_seeker_service import JobSeekerService
from hirehub.services.job_service import JobService
from hirehub.services.resume_service import ResumeService
from hirehub.services.application_service import ApplicationService
from hirehub.services.notification_service import NotificationService
from hirehub.services.admin_service import AdminService

__all__ = [
    "AuthService",
    "UserService",
    "EmployerService",
    "JobSeekerService",
    "JobService",
    "ResumeService",
    "ApplicationService",
    "NotificationService",
    "AdminService",
]
