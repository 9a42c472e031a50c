"""Session-token authentication and role guards.

Sessions are opaque bearer tokens minted on role selection. They identify
the actor for audit purposes; they are not a security boundary.
"""

import secrets
from typing import Callable, Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.database import get_db
from innflow.models.enums import UserRole

security = HTTPBearer()


class AuthenticatedUser:
    """Represents the user behind a session token."""

    def __init__(
        self,
        user_id: UUID,
        email: str,
        name: str,
        role: UserRole,
        property_id: Optional[UUID] = None,
    ):
        self.user_id = user_id
        self.email = email
        self.name = name
        self.role = role
        self.property_id = property_id

    @property
    def actor(self) -> str:
        """Label recorded in audit entries."""
        return f"{self.name} <{self.email}>"


def new_session_token() -> str:
    return secrets.token_urlsafe(32)


async def _resolve_token(token: str, db: AsyncSession) -> Optional[AuthenticatedUser]:
    from innflow.models.user import User

    result = await db.execute(select(User).where(User.session_token == token))
    user = result.scalar_one_or_none()
    if not user:
        return None
    return AuthenticatedUser(
        user_id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        property_id=user.property_id,
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> AuthenticatedUser:
    """Resolve the bearer token to a signed-in user."""
    current_user = await _resolve_token(credentials.credentials, db)
    if not current_user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user


def require_roles(*roles: UserRole) -> Callable[..., AuthenticatedUser]:
    """Dependency factory allowing only the given roles."""
    allowed = frozenset(roles)

    def dependency(
        current_user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        if current_user.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient privileges",
            )
        return current_user

    return dependency


# Access mirrors the back-office navigation
require_staff = require_roles(UserRole.BUSINESS_ADMIN, UserRole.STAFF)
require_admin = require_roles(UserRole.BUSINESS_ADMIN)
require_developer = require_roles(UserRole.DEVELOPER)
