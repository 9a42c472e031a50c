"""Auth router - role-selection sign in."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.database import get_db
from innflow.core.security import get_current_user, new_session_token, AuthenticatedUser
from innflow.models.enums import UserRole
from innflow.models.user import User
from innflow.schemas.auth import LoginRequest, LoginResponse, UserResponse
from innflow.services.property import PropertyService

router = APIRouter(prefix="/auth", tags=["auth"])


def default_identity(role: UserRole) -> tuple[str, str]:
    """Display name and email used when the client supplies none."""
    name = role.value[0] + role.value[1:].lower().replace("_", " ", 1)
    return name, f"{role.value.lower()}@innflow.com"


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """Sign in under a role and receive an opaque session token.

    Developers act at platform level and are not bound to the property.
    """
    default_name, default_email = default_identity(data.role)
    prop = await PropertyService(db).get_property()

    user = User(
        property_id=None if data.role == UserRole.DEVELOPER else prop.id,
        email=data.email or default_email,
        name=data.name or default_name,
        role=data.role,
        session_token=new_session_token(),
    )
    db.add(user)
    await db.commit()

    return LoginResponse(
        access_token=user.session_token,
        user=UserResponse.model_validate(user),
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
):
    """Invalidate the current session token."""
    result = await db.execute(select(User).where(User.id == current_user.user_id))
    user = result.scalar_one_or_none()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    user.session_token = None
    await db.commit()


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: AuthenticatedUser = Depends(get_current_user),
):
    """Get the signed-in user."""
    return UserResponse(
        id=current_user.user_id,
        property_id=current_user.property_id,
        email=current_user.email,
        name=current_user.name,
        role=current_user.role,
    )
