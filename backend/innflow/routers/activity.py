"""Activity router - audit trail and guest notification history."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.database import get_db
from innflow.core.security import require_admin, require_staff, AuthenticatedUser
from innflow.models.audit import NotificationRecord
from innflow.models.enums import AuditAction
from innflow.schemas.admin import AuditLogResponse, NotificationResponse
from innflow.services.audit import AuditService
from innflow.services.property import PropertyService

router = APIRouter(tags=["activity"])


@router.get("/audit-logs", response_model=list[AuditLogResponse])
async def list_audit_logs(
    action: Optional[AuditAction] = None,
    limit: Optional[int] = Query(None, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Audit entries, newest first."""
    prop = await PropertyService(db).get_property()
    return await AuditService(db).recent(prop.id, limit, action)


@router.get("/notifications", response_model=list[NotificationResponse])
async def list_notifications(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """Guest notification outcomes, newest first."""
    prop = await PropertyService(db).get_property()
    result = await db.execute(
        select(NotificationRecord)
        .where(NotificationRecord.property_id == prop.id)
        .order_by(NotificationRecord.id.desc())
    )
    return result.scalars().all()
