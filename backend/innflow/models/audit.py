"""AuditLog and NotificationRecord models."""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import String, DateTime, ForeignKey, Enum as SQLEnum, Text, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from innflow.core.database import Base
from innflow.models.enums import AuditAction, DeliveryStatus, NotificationChannel


class AuditLog(Base):
    """Append-only record of administrative actions.

    Capped per property; the service evicts the oldest rows on insert.
    Autoincrement id gives a total order even for identical timestamps.
    """

    __tablename__ = "audit_log"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    property_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)
    actor: Mapped[str] = mapped_column(String(255), nullable=False)

    action: Mapped[AuditAction] = mapped_column(
        SQLEnum(AuditAction),
        nullable=False,
        index=True,
    )
    details: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)


class NotificationRecord(Base):
    """Delivery outcome of a guest notification. Never affects the booking."""

    __tablename__ = "notification_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    property_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    booking_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)

    channel: Mapped[NotificationChannel] = mapped_column(
        SQLEnum(NotificationChannel),
        default=NotificationChannel.WHATSAPP,
        nullable=False,
    )
    recipient: Mapped[str] = mapped_column(String(50), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[DeliveryStatus] = mapped_column(SQLEnum(DeliveryStatus), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
