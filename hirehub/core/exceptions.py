"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class BadRequestException(APIException):
    """400 Bad Request"""

    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST"):
        super().__init__(400, code, message)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class ForbiddenException(APIException):
    """403 Forbidden"""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(403, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(409, code, message)


class ValidationException(APIException):
    """422 Validation Error"""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(422, code, message, details)


class InternalServerException(APIException):
    """500 Internal Server Error"""

    def __init__(
        self,
        message: str = "Internal server error",
        code: str = "INTERNAL_ERROR",
    ):
        super().__init__(500, code, message)


# Authentication specific exceptions
class InvalidCredentialsException(UnauthorizedException):
    """Invalid email or password"""

    def __init__(self):
        super().__init__(
            message="Invalid credentials",
            code="INVALID_CREDENTIALS",
        )


class TokenExpiredException(UnauthorizedException):
    """Token has expired"""

    def __init__(self):
        super().__init__(
            message="Token has expired",
            code="TOKEN_EXPIRED",
        )


class InvalidTokenException(UnauthorizedException):
    """Token is invalid"""

    def __init__(self):
        super().__init__(
            message="Invalid token",
            code="INVALID_TOKEN",
        )


class InvalidResetTokenException(BadRequestException):
    """Password reset token unknown, used or expired"""

    def __init__(self):
        super().__init__(
            message="Invalid or expired token",
            code="INVALID_RESET_TOKEN",
        )


# Resource specific exceptions
class UserNotFoundException(NotFoundException):
    """User not found"""

    def __init__(self, user_id: Any = None):
        message = f"User with id '{user_id}' not found." if user_id else "User not found"
        super().__init__(message=message, code="USER_NOT_FOUND")


class EmployerNotFoundException(NotFoundException):
    """Employer not found"""

    def __init__(self, message: str = "Employer not found"):
        super().__init__(message=message, code="EMPLOYER_NOT_FOUND")


class JobSeekerNotFoundException(NotFoundException):
    """Job seeker not found"""

    def __init__(self, message: str = "JobSeeker not found"):
        super().__init__(message=message, code="JOB_SEEKER_NOT_FOUND")


class JobNotFoundException(NotFoundException):
    """Job not found"""

    def __init__(self, job_id: Any = None):
        message = f"Job with id '{job_id}' not found." if job_id else "Job not found"
        super().__init__(message=message, code="JOB_NOT_FOUND")


class ResumeNotFoundException(NotFoundException):
    """Resume not found"""

    def __init__(self, message: str = "Resume not found"):
        super().__init__(message=message, code="RESUME_NOT_FOUND")


class ApplicationNotFoundException(NotFoundException):
    """Application not found"""

    def __init__(self, application_id: Any = None):
        message = (
            f"Application with id '{application_id}' not found."
            if application_id
            else "Application not found"
        )
        super().__init__(message=message, code="APPLICATION_NOT_FOUND")


class NotificationNotFoundException(NotFoundException):
    """Notification not found"""

    def __init__(self, notification_id: Any = None):
        message = (
            f"Notification with id '{notification_id}' not found."
            if notification_id
            else "Notification not found"
        )
        super().__init__(message=message, code="NOTIFICATION_NOT_FOUND")


class EmailAlreadyExistsException(ConflictException):
    """Email already registered"""

    def __init__(self, email: str = None):
        message = f"Email '{email}' is already registered." if email else "Email already registered"
        super().__init__(
            message=message,
            code="EMAIL_EXISTS",
        )


class ProfileAlreadyExistsException(ConflictException):
    """User already owns a profile of this kind"""

    def __init__(self, profile: str):
        super().__init__(
            message=f"{profile} profile already exists for this user.",
            code="PROFILE_EXISTS",
        )


class JobSeekerHasDependentsException(ConflictException):
    """Job seeker still owns resumes or applications"""

    def __init__(self):
        super().__init__(
            message="Cannot delete job seeker with existing resumes or applications.",
            code="JOB_SEEKER_HAS_DEPENDENTS",
        )


class ResumeInUseException(ConflictException):
    """Resume is referenced by at least one application"""

    def __init__(self):
        super().__init__(
            message="Cannot delete resume because it has dependent records.",
            code="RESUME_IN_USE",
        )


class RoleMismatchException(BadRequestException):
    """Profile kind does not match the owning user's role"""

    def __init__(self, profile: str, role: str):
        super().__init__(
            message=f"A {profile} profile requires the {profile} role; user has role '{role}'.",
            code="ROLE_MISMATCH",
        )


class RoleChangeBlockedException(ConflictException):
    """Role change would orphan an existing profile"""

    def __init__(self, profile: str):
        super().__init__(
            message=f"Cannot change role while the user still has a {profile} profile.",
            code="ROLE_CHANGE_BLOCKED",
        )
