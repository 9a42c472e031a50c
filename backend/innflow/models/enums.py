"""Enumeration types for the InnFlow domain model."""

from enum import Enum


class UserRole(str, Enum):
    """Role a signed-in user acts under."""
    DEVELOPER = "DEVELOPER"
    BUSINESS_ADMIN = "BUSINESS_ADMIN"
    STAFF = "STAFF"
    GUEST = "GUEST"


class RoomStatus(str, Enum):
    """Inventory status of a room."""
    ACTIVE = "ACTIVE"
    MAINTENANCE = "MAINTENANCE"
    BLOCKED = "BLOCKED"


class BookingStatus(str, Enum):
    """Lifecycle status of a booking."""
    PROVISIONAL = "PROVISIONAL"  # Held without confirmed payment
    CONFIRMED = "CONFIRMED"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"
    CANCELLED = "CANCELLED"      # Terminal; frees the room


class PaymentStatus(str, Enum):
    """Payment axis of a booking, independent of BookingStatus."""
    PENDING = "PENDING"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    PAID = "PAID"
    REFUNDED = "REFUNDED"


class PaymentMethod(str, Enum):
    """How the guest intends to pay."""
    IKHOKHA = "IKHOKHA"                  # Card gateway, verified at booking time
    EFT = "EFT"
    CASH_ON_ARRIVAL = "CASH_ON_ARRIVAL"
    CARD_ON_ARRIVAL = "CARD_ON_ARRIVAL"

    @property
    def is_instant(self) -> bool:
        """True when payment is verified at the moment of booking."""
        return _INSTANT_METHODS[self]


_INSTANT_METHODS = {
    PaymentMethod.IKHOKHA: True,
    PaymentMethod.EFT: False,
    PaymentMethod.CASH_ON_ARRIVAL: False,
    PaymentMethod.CARD_ON_ARRIVAL: False,
}


class DeliveryStatus(str, Enum):
    """Outcome of an outbound guest notification."""
    DELIVERED = "DELIVERED"
    FAILED = "FAILED"
    SIMULATED = "SIMULATED"


class NotificationChannel(str, Enum):
    WHATSAPP = "WHATSAPP"


class TenantStatus(str, Enum):
    """Platform tenant status (cosmetic, not enforced)."""
    ACTIVE = "ACTIVE"
    TRIALING = "TRIALING"
    SUSPENDED = "SUSPENDED"


class TenantPlan(str, Enum):
    STARTER = "STARTER"
    PROFESSIONAL = "PROFESSIONAL"
    ENTERPRISE = "ENTERPRISE"


class AuditAction(str, Enum):
    """Actions tracked in audit log."""
    BOOKING_CREATED = "BOOKING_CREATED"
    BOOKING_STATUS_CHANGE = "BOOKING_STATUS_CHANGE"
    PAYMENT_STATUS_CHANGE = "PAYMENT_STATUS_CHANGE"
    BOOKING_DELETED = "BOOKING_DELETED"
    WHATSAPP_DISPATCH = "WHATSAPP_DISPATCH"
    FINANCIAL_EXPORT = "FINANCIAL_EXPORT"
    FINANCIAL_CASH_UP = "FINANCIAL_CASH_UP"
    SETTINGS_UPDATED = "SETTINGS_UPDATED"
    ROOM_CREATED = "ROOM_CREATED"
    ROOM_UPDATED = "ROOM_UPDATED"
    ROOM_DELETED = "ROOM_DELETED"
    STAFF_CREATED = "STAFF_CREATED"
    STAFF_UPDATED = "STAFF_UPDATED"
    STAFF_REMOVED = "STAFF_REMOVED"
    TENANT_CREATED = "TENANT_CREATED"
    TENANT_UPDATED = "TENANT_UPDATED"
