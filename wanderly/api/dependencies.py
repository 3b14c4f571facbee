"""Shared dependencies for API endpoints."""
from typing import Optional

from fastapi import Depends, Header

from wanderly.config import Settings, get_settings
from wanderly.core.security import Principal, verify_token
from wanderly.domain.errors import ForbiddenError, UnauthorizedError


async def get_current_principal(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    settings: Settings = Depends(get_settings),
) -> Principal:
    """Resolve the caller from an ``Authorization: Bearer <token>`` header.

    Raises:
        UnauthorizedError: 401 if no token was sent
        ForbiddenError: 403 if the token is invalid or expired
    """
    token = None
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            token = credentials.strip()

    if not token:
        raise UnauthorizedError("Authentication required")

    principal = verify_token(token, settings.TOKEN_SECRET)
    if principal is None:
        raise ForbiddenError("Invalid or expired token")
    return principal


async def require_admin(principal: Principal = Depends(get_current_principal)) -> Principal:
    """Allow only admin principals."""
    if not principal.is_admin:
        raise ForbiddenError("Admin access required")
    return principal


def ensure_same_user(principal: Principal, user_id: str) -> None:
    """Reject callers acting on another user's data."""
    if principal.user_id != user_id:
        raise ForbiddenError("Unauthorized")


async def require_development(settings: Settings = Depends(get_settings)) -> bool:
    """Gate developer-only endpoints to the development environment."""
    if not settings.is_development:
        raise ForbiddenError("Forbidden")
    return True
