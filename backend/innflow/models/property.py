"""Property, SeasonalRate and Room models."""

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import (
    String, DateTime, Date, ForeignKey, Enum as SQLEnum, Text, Integer,
    Numeric, CheckConstraint, JSON, Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from innflow.core.database import Base
from innflow.models.enums import RoomStatus

DEFAULT_WHATSAPP_TEMPLATE = (
    "Hi {{guest}}, your booking {{ref}} at {{property}} is confirmed for {{date}}. "
    "Secure your stay: {{link}}"
)


class Property(Base):
    """The single property served by a deployment.

    Owns branding, contact details, the ordered seasonal rate list, the
    portal room layout grid, the WhatsApp template and the booking reference
    counter.
    """

    __tablename__ = "properties"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # Branding / contact
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), default="")
    contact_email: Mapped[str] = mapped_column(String(255), default="")
    contact_phone: Mapped[str] = mapped_column(String(50), default="")
    staff_whatsapp: Mapped[str] = mapped_column(String(50), default="")
    check_in_time: Mapped[str] = mapped_column(String(5), default="14:00")
    check_out_time: Mapped[str] = mapped_column(String(5), default="10:00")
    primary_color: Mapped[str] = mapped_column(String(7), default="#3B82F6")
    logo_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    header_image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Guest messaging
    whatsapp_template: Mapped[str] = mapped_column(Text, default=DEFAULT_WHATSAPP_TEMPLATE)
    webhook_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Portal room map: [{"room_id", "x", "y", "w", "h"}, ...]
    layout_grid: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)

    # Monotonic booking reference counter (never reset on year change)
    last_ref_number: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # List order is the pricing tie-break order
    seasonal_rates: Mapped[list["SeasonalRate"]] = relationship(
        "SeasonalRate",
        back_populates="property",
        cascade="all, delete-orphan",
        order_by="SeasonalRate.position",
        lazy="selectin",
    )

    __table_args__ = (
        CheckConstraint("last_ref_number >= 0", name="last_ref_number_non_negative"),
    )


class SeasonalRate(Base):
    """A date-range-scoped multiplier on room base rates (inclusive range)."""

    __tablename__ = "seasonal_rates"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    property_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    multiplier: Mapped[Decimal] = mapped_column(Numeric(6, 3), nullable=False, default=Decimal("1"))
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    property: Mapped["Property"] = relationship("Property", back_populates="seasonal_rates")

    __table_args__ = (
        CheckConstraint("multiplier >= 0", name="multiplier_non_negative"),
    )


class Room(Base):
    """A bookable room. Deleting a room leaves its bookings untouched."""

    __tablename__ = "rooms"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    property_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    room_number: Mapped[str] = mapped_column(String(20), nullable=False)
    room_type: Mapped[str] = mapped_column(String(100), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=2)
    price_per_night: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status: Mapped[RoomStatus] = mapped_column(
        SQLEnum(RoomStatus),
        default=RoomStatus.ACTIVE,
        nullable=False,
        index=True,
    )
    description: Mapped[str] = mapped_column(Text, default="")
    images: Mapped[list[str]] = mapped_column(JSON, default=list)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    __table_args__ = (
        CheckConstraint("capacity >= 1", name="capacity_positive"),
        CheckConstraint("price_per_night >= 0", name="price_non_negative"),
    )
