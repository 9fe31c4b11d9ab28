"""
Authentication routes.

All four endpoints are anonymous. Register and login are rate limited per
client IP; password reset requests are not.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.core.database import get_db
from hirehub.core.email import EmailSender, get_email_sender
from hirehub.core.exceptions import InvalidCredentialsException, InvalidResetTokenException
from hirehub.core.rate_limit import RATE_AUTH, limiter
from hirehub.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    LoginRequest,
    ResetPasswordRequest,
)
from hirehub.schemas.base import MessageResponse
from hirehub.schemas.user import UserCreate, UserResponse
from hirehub.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])
auth_service = AuthService()

FORGOT_PASSWORD_MESSAGE = "If this email is registered, password reset instructions have been sent."


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_AUTH)
async def register(
    request: Request,
    body: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create an Employer or JobSeeker account."""
    return await auth_service.register(db, body)


@router.post("/login", response_model=AuthResponse)
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """Exchange email and password for a bearer token."""
    result = await auth_service.login(db, email=body.email, password=body.password)
    if result is None:
        raise InvalidCredentialsException()
    return result


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    body: ForgotPasswordRequest,
    db: AsyncSession = Depends(get_db),
    email_sender: EmailSender = Depends(get_email_sender),
):
    """Same answer whether or not the email is registered."""
    await auth_service.request_password_reset(
        db,
        email_sender,
        email=body.email,
        origin_base_url=body.origin_base_url,
    )
    return MessageResponse(message=FORGOT_PASSWORD_MESSAGE)


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    body: ResetPasswordRequest,
    db: AsyncSession = Depends(get_db),
):
    ok = await auth_service.reset_password_with_token(
        db,
        token=body.token,
        new_password=body.new_password,
    )
    if not ok:
        raise InvalidResetTokenException()
    return MessageResponse(message="Password has been reset successfully.")
