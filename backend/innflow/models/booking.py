"""Booking model."""

import uuid
from datetime import datetime, date
from typing import Optional

from sqlalchemy import (
    String, DateTime, Date, ForeignKey, Enum as SQLEnum, Integer, CheckConstraint, Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from innflow.core.database import Base
from innflow.models.enums import BookingStatus, PaymentStatus, PaymentMethod


class Booking(Base):
    """A guest reservation of one room over a half-open date range.

    ``total_amount`` is a snapshot taken at creation and is never recomputed.
    ``room_id`` intentionally has no foreign key: deleting a room leaves its
    bookings pointing at a missing room.
    """

    __tablename__ = "bookings"

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
    reference: Mapped[str] = mapped_column(String(32), nullable=False, unique=True, index=True)

    # Guest
    guest_name: Mapped[str] = mapped_column(String(255), nullable=False)
    guest_email: Mapped[str] = mapped_column(String(255), default="")
    guest_phone: Mapped[str] = mapped_column(String(50), default="")
    guest_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    guest_id_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    room_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)

    # Dates (check-out exclusive)
    check_in_date: Mapped[date] = mapped_column(Date, nullable=False)
    check_out_date: Mapped[date] = mapped_column(Date, nullable=False)

    total_amount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    status: Mapped[BookingStatus] = mapped_column(
        SQLEnum(BookingStatus),
        default=BookingStatus.PROVISIONAL,
        nullable=False,
        index=True,
    )
    payment_status: Mapped[PaymentStatus] = mapped_column(
        SQLEnum(PaymentStatus),
        default=PaymentStatus.PENDING,
        nullable=False,
    )
    payment_method: Mapped[Optional[PaymentMethod]] = mapped_column(
        SQLEnum(PaymentMethod),
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    __table_args__ = (
        CheckConstraint("check_out_date > check_in_date", name="stay_has_nights"),
    )
