"""
One-time password reset tokens.

The raw token only ever leaves the server inside the reset link. The database
keeps its SHA-256 hex digest, so a leaked table cannot be replayed.
"""
import hashlib
import secrets
from urllib.parse import quote
from datetime import datetime, timedelta, timezone

from hirehub.core.config import settings

RESET_TOKEN_BYTES = 32


def create_raw_token(nbytes: int = RESET_TOKEN_BYTES) -> str:
    """URL-safe base64 token without padding."""
    return secrets.token_urlsafe(nbytes)


def hash_token(raw_token: str) -> str:
    """Lowercase hex SHA-256 of the UTF-8 encoded token."""
    return hashlib.sha256(raw_token.encode("utf-8")).hexdigest()


def reset_token_expiry(now: datetime = None) -> datetime:
    now = now or datetime.now(timezone.utc)
    return now + timedelta(hours=settings.password_reset_expire_hours)


def build_reset_link(origin_base_url: str, raw_token: str) -> str:
    return f"{origin_base_url.rstrip('/')}/reset-password?token={quote(raw_token, safe='')}"
