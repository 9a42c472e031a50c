"""Tenant model (platform directory, cosmetic)."""

import uuid
from datetime import datetime

from sqlalchemy import String, DateTime, Enum as SQLEnum, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from innflow.core.database import Base
from innflow.models.enums import TenantStatus, TenantPlan


class Tenant(Base):
    """A guesthouse business listed in the developer portal.

    Metadata only; tenancy is not enforced anywhere.
    """

    __tablename__ = "tenants"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[TenantStatus] = mapped_column(
        SQLEnum(TenantStatus),
        default=TenantStatus.ACTIVE,
        nullable=False,
    )
    plan: Mapped[TenantPlan] = mapped_column(
        SQLEnum(TenantPlan),
        default=TenantPlan.STARTER,
        nullable=False,
    )
    users: Mapped[int] = mapped_column(Integer, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
