"""
Authentication service - registration, login and the password reset flow.

Login failures come back as ``None`` rather than an exception so the
caller cannot tell "no such user" from "wrong password"; the route turns
``None`` into a single 401.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.core import email_templates
from hirehub.core.config import settings
from hirehub.core.email import EmailSender
from hirehub.core.exceptions import EmailAlreadyExistsException, ForbiddenException
from hirehub.core.logging import get_logger
from hirehub.core.security import create_access_token, hash_password, verify_password
from hirehub.core.tokens import build_reset_link, create_raw_token, hash_token, reset_token_expiry
from hirehub.models.user import ROLE_ADMIN
from hirehub.repositories.password_reset_repository import PasswordResetRepository
from hirehub.repositories.user_repository import UserRepository
from hirehub.schemas.auth import AuthResponse
from hirehub.schemas.user import UserCreate, UserResponse
from hirehub.services.user_service import to_user_response

logger = get_logger(__name__)


class AuthService:
    """Handles all authentication business logic."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.reset_repo = PasswordResetRepository()

    async def register(
        self,
        db: AsyncSession,
        data: UserCreate,
    ) -> UserResponse:
        """
        Create an account with a bcrypt-hashed password.

        Raises:
            EmailAlreadyExistsException: If email is already registered.
            ForbiddenException: If an anonymous caller asks for the Admin role.
        """
        if data.role == ROLE_ADMIN:
            raise ForbiddenException("Admin accounts cannot be self-registered")

        if await self.user_repo.email_exists(db, data.email):
            raise EmailAlreadyExistsException(data.email)

        user = await self.user_repo.create(
            db,
            full_name=data.full_name,
            email=data.email,
            password_hash=hash_password(data.password),
            role=data.role,
            date_of_birth=data.date_of_birth,
            gender=data.gender,
            address=data.address,
            is_active=True,
        )
        await db.commit()

        logger.info("user_registered", user_id=str(user.id), role=user.role)
        return to_user_response(user)

    async def login(
        self,
        db: AsyncSession,
        *,
        email: str,
        password: str,
    ) -> Optional[AuthResponse]:
        """Verify credentials and issue a bearer token, or return None."""
        user = await self.user_repo.get_by_email(db, email)

        if not user or not verify_password(password, user.password_hash):
            logger.info("login_failed", reason="bad_credentials")
            return None

        if not user.is_active:
            logger.info("login_failed", reason="inactive", user_id=str(user.id))
            return None

        token, expires_at = create_access_token(
            subject=str(user.id),
            role=user.role,
            email=user.email,
        )
        logger.info("login_succeeded", user_id=str(user.id))
        return AuthResponse(
            token=token,
            expires_at=expires_at,
            role=user.role,
            user_id=user.id,
        )

    async def request_password_reset(
        self,
        db: AsyncSession,
        email_sender: EmailSender,
        *,
        email: str,
        origin_base_url: Optional[str] = None,
    ) -> None:
        """
        Issue a single-use reset token and email the link.

        Unknown emails are a silent no-op so the response never reveals
        whether an account exists. Only the token hash is stored.
        """
        user = await self.user_repo.get_by_email(db, email)
        if not user:
            logger.info("password_reset_unknown_email")
            return

        raw_token = create_raw_token()
        await self.reset_repo.create(
            db,
            user_id=user.id,
            token_hash=hash_token(raw_token),
            expires_at=reset_token_expiry(),
            used=False,
        )
        await db.commit()

        link = build_reset_link(origin_base_url or settings.frontend_base_url, raw_token)
        body = email_templates.password_reset(
            user.full_name,
            link,
            settings.password_reset_expire_hours,
        )
        sent = await email_sender.send(user.email, "Reset your password", body)
        if not sent:
            logger.warning("password_reset_email_not_sent", user_id=str(user.id))

    async def reset_password_with_token(
        self,
        db: AsyncSession,
        *,
        token: str,
        new_password: str,
    ) -> bool:
        """False for an unknown, used or expired token."""
        if not token:
            return False

        now = datetime.now(timezone.utc)
        reset = await self.reset_repo.get_usable_by_token_hash(db, hash_token(token), now)
        if not reset:
            return False

        user = await self.user_repo.get_by_id(db, reset.user_id)
        if not user:
            return False

        user.password_hash = hash_password(new_password)
        await self.reset_repo.mark_used(db, reset)
        await db.commit()

        logger.info("password_reset_completed", user_id=str(user.id))
        return True
