"""Staff router - staff directory managed by the business admin."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.database import get_db
from innflow.core.security import require_admin, AuthenticatedUser
from innflow.models.enums import AuditAction
from innflow.models.user import StaffMember
from innflow.schemas.admin import StaffCreate, StaffResponse, StaffUpdate
from innflow.services.audit import AuditService
from innflow.services.property import PropertyService

router = APIRouter(prefix="/staff", tags=["staff"])


async def get_staff_or_404(staff_id: UUID, db: AsyncSession) -> StaffMember:
    result = await db.execute(select(StaffMember).where(StaffMember.id == staff_id))
    member = result.scalar_one_or_none()
    if not member:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Staff member not found")
    return member


@router.get("", response_model=list[StaffResponse])
async def list_staff(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """List staff members."""
    result = await db.execute(select(StaffMember).order_by(StaffMember.created_at))
    return result.scalars().all()


@router.post("", response_model=StaffResponse, status_code=status.HTTP_201_CREATED)
async def invite_staff(
    data: StaffCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Invite a staff member. They have not signed in yet."""
    prop = await PropertyService(db).get_property()

    member = StaffMember(property_id=prop.id, **data.model_dump())
    db.add(member)
    await db.flush()

    await AuditService(db).log(
        action=AuditAction.STAFF_CREATED,
        details=f"Invited new staff member: {member.name}",
        property_id=prop.id,
        actor=current_user.actor,
        user_id=current_user.user_id,
    )
    await db.commit()
    return member


@router.patch("/{staff_id}", response_model=StaffResponse)
async def update_staff(
    staff_id: UUID,
    data: StaffUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Update a staff member's details, role or access."""
    member = await get_staff_or_404(staff_id, db)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(member, field, value)

    await AuditService(db).log(
        action=AuditAction.STAFF_UPDATED,
        details=f"Updated details for {member.name}",
        property_id=member.property_id,
        actor=current_user.actor,
        user_id=current_user.user_id,
    )
    await db.commit()
    return member


@router.delete("/{staff_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_staff(
    staff_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Revoke a staff member's access."""
    member = await get_staff_or_404(staff_id, db)
    name = member.name
    property_id = member.property_id

    await db.delete(member)
    await AuditService(db).log(
        action=AuditAction.STAFF_REMOVED,
        details=f"Revoked access for user: {name}",
        property_id=property_id,
        actor=current_user.actor,
        user_id=current_user.user_id,
    )
    await db.commit()
