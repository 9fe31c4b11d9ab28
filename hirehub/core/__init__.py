"""Core module exports."""
from hirehub.core.config import settings, get_settings
from hirehub.core.database import Base, get_db, init_db, close_db, engine, async_session_maker
from hirehub.core.security import (
    verify_password,
    hash_password,
    create_access_token,
    decode_token,
    verify_token_type,
)
from hirehub.core.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    ValidationException,
    InternalServerException,
    InvalidCredentialsException,
    TokenExpiredException,
    InvalidTokenException,
    InvalidResetTokenException,
    UserNotFoundException,
    EmployerNotFoundException,
    JobSeekerNotFoundException,
    JobNotFoundException,
    ResumeNotFoundException,
    ApplicationNotFoundException,
    NotificationNotFoundException,
    EmailAlreadyExistsException,
    ProfileAlreadyExistsException,
    JobSeekerHasDependentsException,
    ResumeInUseException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    # Security
    "verify_password",
    "hash_password",
    "create_access_token",
    "decode_token",
    "verify_token_type",
    # Exceptions
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "ValidationException",
    "InternalServerException",
    "InvalidCredentialsException",
    "TokenExpiredException",
    "InvalidTokenException",
    "InvalidResetTokenException",
    "UserNotFoundException",
    "EmployerNotFoundException",
    "JobSeekerNotFoundException",
    "JobNotFoundException",
    "ResumeNotFoundException",
    "ApplicationNotFoundException",
    "NotificationNotFoundException",
    "EmailAlreadyExistsException",
    "ProfileAlreadyExistsException",
    "JobSeekerHasDependentsException",
    "ResumeInUseException",
]
