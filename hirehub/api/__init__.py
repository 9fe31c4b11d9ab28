"""
API package.
"""
from hirehub.api.routes import api_router
from hirehub.api.deps import (
    ensure_owner_or_admin,
    get_current_user,
    get_token_user,
    is_admin,
    require_roles,
)

__all__ = [
    "api_router",
    "ensure_owner_or_admin",
    "get_current_user",
    "get_token_user",
    "is_admin",
    "require_roles",
]
