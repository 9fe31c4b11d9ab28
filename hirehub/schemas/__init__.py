"""
Pydantic schemas for API validation and serialization.
"""
from hirehub.schemas.base import BaseSchema, MessageResponse, ErrorResponse
from hirehub.schemas.auth import (
    LoginRequest,
    AuthResponse,
    ForgotPasswordRequest,
    ResetPasswordRequest,
)
from hirehub.schemas.user import UserCreate, UserUpdate, UserResponse
from hirehub.schemas.employer import EmployerCreate, EmployerUpdate, EmployerResponse
from hirehub.schemas.job_seeker import JobSeekerCreate, JobSeekerUpdate, JobSeekerResponse
from hirehub.schemas.job import JobCreate, JobUpdate, JobResponse
from hirehub.schemas.resume import (
    ResumeCreate,
    ResumeUpdate,
    ResumeResponse,
    ResumeUploadRequest,
    ResumeUploadResponse,
)
from hirehub.schemas.application import (
    ApplicationCreate,
    ApplicationUpdate,
    ApplicationResponse,
    ReviewRequest,
    ScheduleInterviewRequest,
)
from hirehub.schemas.notification import (
    NotificationCreate,
    NotificationUpdate,
    NotificationResponse,
    NotifyApplicantRequest,
    MarkAllReadResponse,
)
from hirehub.schemas.admin import StatsResponse

__all__ = [
    # Base
    "BaseSchema",
    "MessageResponse",
    "ErrorResponse",
    # Auth
    "LoginRequest",
    "AuthResponse",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    # User
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    # Employer
    "EmployerCreate",
    "EmployerUpdate",
    "EmployerResponse",
    # Job seeker
    "JobSeekerCreate",
    "JobSeekerUpdate",
    "JobSeekerResponse",
    # Job
    "JobCreate",
    "JobUpdate",
    "JobResponse",
    # Resume
    "ResumeCreate",
    "ResumeUpdate",
    "ResumeResponse",
    "ResumeUploadRequest",
    "ResumeUploadResponse",
    # Application
    "ApplicationCreate",
    "ApplicationUpdate",
    "ApplicationResponse",
    "ReviewRequest",
    "ScheduleInterviewRequest",
    # Notification
    "NotificationCreate",
    "NotificationUpdate",
    "NotificationResponse",
    "NotifyApplicantRequest",
    "MarkAllReadResponse",
    # Admin
    "StatsResponse",
]
