"""Tenants router - developer portal tenant directory."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.database import get_db
from innflow.core.security import require_developer, AuthenticatedUser
from innflow.models.enums import AuditAction
from innflow.models.tenant import Tenant
from innflow.schemas.admin import TenantCreate, TenantResponse, TenantUpdate
from innflow.services.audit import AuditService
from innflow.services.property import PropertyService

router = APIRouter(prefix="/tenants", tags=["tenants"])


async def _log(db: AsyncSession, action: AuditAction, details: str, current_user: AuthenticatedUser) -> None:
    # Developers are platform level; entries land on the deployment's property log
    prop = await PropertyService(db).get_property()
    await AuditService(db).log(
        action=action,
        details=details,
        property_id=prop.id,
        actor=current_user.actor,
        user_id=current_user.user_id,
    )


@router.get("", response_model=list[TenantResponse])
async def list_tenants(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_developer),
):
    """List tenant guesthouses."""
    result = await db.execute(select(Tenant).order_by(Tenant.created_at))
    return result.scalars().all()


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
async def create_tenant(
    data: TenantCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_developer),
):
    """Register a tenant guesthouse."""
    tenant = Tenant(**data.model_dump())
    db.add(tenant)
    await db.flush()

    await _log(db, AuditAction.TENANT_CREATED, f"Created new tenant guesthouse: {tenant.name}", current_user)
    await db.commit()
    return tenant


@router.patch("/{tenant_id}", response_model=TenantResponse)
async def update_tenant(
    tenant_id: UUID,
    data: TenantUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_developer),
):
    """Update a tenant's name, status, plan or seat count."""
    result = await db.execute(select(Tenant).where(Tenant.id == tenant_id))
    tenant = result.scalar_one_or_none()
    if not tenant:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tenant not found")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(tenant, field, value)

    await _log(db, AuditAction.TENANT_UPDATED, f"Updated configuration for tenant {tenant.name}", current_user)
    await db.commit()
    return tenant
