"""CashUpRecord model."""

import uuid
from datetime import date as date_type, datetime
from decimal import Decimal

from sqlalchemy import String, DateTime, Date, ForeignKey, Numeric, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from innflow.core.database import Base


class CashUpRecord(Base):
    """Daily register reconciliation snapshot. ``total`` is computed server-side."""

    __tablename__ = "cash_up_records"

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
    date: Mapped[date_type] = mapped_column(Date, nullable=False, index=True)

    cash: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"))
    card: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"))
    eft: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"))
    total: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"))

    notes: Mapped[str] = mapped_column(Text, default="")
    reconciled_by: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
