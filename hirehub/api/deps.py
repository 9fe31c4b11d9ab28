"""
API dependencies for dependency injection.
"""
import uuid
from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.core.database import get_db
from hirehub.core.exceptions import (
    ForbiddenException,
    InvalidTokenException,
    UnauthorizedException,
)
from hirehub.core.security import decode_token, verify_token_type
from hirehub.models.user import ROLE_ADMIN, User
from hirehub.repositories.user_repository import UserRepository

# Security scheme
security = HTTPBearer(auto_error=False)

_user_repo = UserRepository()


async def get_token_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Resolve the bearer token to its user, active or not.

    Only the reactivation route should depend on this directly.

    Raises:
        UnauthorizedException: If no token provided
        InvalidTokenException: If the token is invalid, expired or its user is gone
    """
    if not credentials:
        raise UnauthorizedException("Authentication required")

    payload = decode_token(credentials.credentials)
    if not payload or not verify_token_type(payload, "access"):
        raise InvalidTokenException()

    try:
        user_id = uuid.UUID(str(payload.get("sub")))
    except ValueError:
        raise InvalidTokenException()

    user = await _user_repo.get_by_id(db, user_id)
    if not user:
        raise InvalidTokenException()

    request.state.current_user = user
    return user


async def get_current_user(
    current_user: User = Depends(get_token_user),
) -> User:
    """The authenticated user; deactivated accounts are refused."""
    if not current_user.is_active:
        raise ForbiddenException("User account is disabled", code="ACCOUNT_DISABLED")
    return current_user


def require_roles(*roles: str) -> Callable:
    """
    Dependency factory enforcing the caller's role.

    Usage:
        @router.post("", dependencies=[Depends(require_roles("Employer"))])
    """

    async def _check(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise ForbiddenException(f"Requires role: {', '.join(roles)}")
        return current_user

    return _check


def is_admin(user: User) -> bool:
    return user.role == ROLE_ADMIN


def ensure_owner_or_admin(current_user: User, owner_user_id: uuid.UUID) -> None:
    """Raise unless the caller is the owner of the resource or an admin."""
    if current_user.id != owner_user_id and not is_admin(current_user):
        raise ForbiddenException("Not allowed to act on another user's account")
