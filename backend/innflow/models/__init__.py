"""SQLAlchemy models for InnFlow."""

from innflow.models.property import Property, SeasonalRate, Room
from innflow.models.booking import Booking
from innflow.models.audit import AuditLog, NotificationRecord
from innflow.models.user import User, StaffMember
from innflow.models.tenant import Tenant
from innflow.models.cash_up import CashUpRecord

__all__ = [
    "Property",
    "SeasonalRate",
    "Room",
    "Booking",
    "AuditLog",
    "NotificationRecord",
    "User",
    "StaffMember",
    "Tenant",
    "CashUpRecord",
]
