"""Audit logging service."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.config import get_settings
from innflow.models.audit import AuditLog
from innflow.models.enums import AuditAction

logger = logging.getLogger(__name__)


class AuditService:
    """Service for creating audit log entries.

    The log is append-only and capped per property: after each insert the
    entries beyond the newest ``AUDIT_LOG_CAP`` are evicted, oldest first.
    """

    def __init__(self, db: AsyncSession, cap: Optional[int] = None):
        self.db = db
        self.cap = cap if cap is not None else get_settings().audit_log_cap

    async def log(
        self,
        action: AuditAction,
        details: str,
        property_id: UUID,
        actor: str,
        user_id: Optional[UUID] = None,
    ) -> AuditLog:
        """Create an audit log entry."""
        entry = AuditLog(
            action=action,
            details=details,
            property_id=property_id,
            actor=actor,
            user_id=user_id,
        )
        self.db.add(entry)
        await self.db.flush()
        await self._evict(property_id)
        logger.debug(f"[AUDIT] {action.value}: {details}")
        return entry

    async def _evict(self, property_id: UUID) -> None:
        stale = (
            select(AuditLog.id)
            .where(AuditLog.property_id == property_id)
            .order_by(AuditLog.id.desc())
            .offset(self.cap)
        )
        stale_ids = (await self.db.execute(stale)).scalars().all()
        if stale_ids:
            await self.db.execute(delete(AuditLog).where(AuditLog.id.in_(stale_ids)))

    async def recent(
        self,
        property_id: UUID,
        limit: Optional[int] = None,
        action: Optional[AuditAction] = None,
    ) -> list[AuditLog]:
        """Newest entries first, optionally only one action type."""
        query = select(AuditLog).where(AuditLog.property_id == property_id)
        if action:
            query = query.where(AuditLog.action == action)
        result = await self.db.execute(query.order_by(AuditLog.id.desc()).limit(limit or self.cap))
        return list(result.scalars().all())

    async def log_status_change(
        self,
        reference: str,
        field: str,
        before: str,
        after: str,
        property_id: UUID,
        actor: str,
        user_id: Optional[UUID] = None,
    ) -> AuditLog:
        """Log a booking status or payment status change with before/after values."""
        action = (
            AuditAction.PAYMENT_STATUS_CHANGE if field == "payment_status"
            else AuditAction.BOOKING_STATUS_CHANGE
        )
        label = "payment status" if field == "payment_status" else "status"
        return await self.log(
            action=action,
            details=f"Booking {reference} {label} changed from {before} to {after}",
            property_id=property_id,
            actor=actor,
            user_id=user_id,
        )
