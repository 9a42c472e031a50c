"""Staff, tenant, audit log and notification schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from innflow.models.enums import (
    AuditAction,
    DeliveryStatus,
    NotificationChannel,
    TenantPlan,
    TenantStatus,
    UserRole,
)
from innflow.schemas.base import BaseSchema, PartialUpdateSchema, IDMixin


class StaffCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    role: UserRole = UserRole.STAFF
    access: list[str] = ["General"]


class StaffUpdate(PartialUpdateSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    access: Optional[list[str]] = None


class StaffResponse(BaseSchema, IDMixin):
    name: str
    email: str
    role: UserRole
    access: list[str]
    last_login: Optional[datetime] = None


class TenantCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=255)
    status: TenantStatus = TenantStatus.ACTIVE
    plan: TenantPlan = TenantPlan.STARTER
    users: int = Field(default=0, ge=0)


class TenantUpdate(PartialUpdateSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    status: Optional[TenantStatus] = None
    plan: Optional[TenantPlan] = None
    users: Optional[int] = Field(None, ge=0)


class TenantResponse(BaseSchema, IDMixin):
    name: str
    status: TenantStatus
    plan: TenantPlan
    users: int


class AuditLogResponse(BaseSchema):
    id: int
    property_id: UUID
    user_id: Optional[UUID] = None
    actor: str
    action: AuditAction
    details: str
    created_at: datetime


class NotificationResponse(BaseSchema):
    id: int
    booking_id: Optional[UUID] = None
    channel: NotificationChannel
    recipient: str
    message: str
    status: DeliveryStatus
    created_at: datetime
