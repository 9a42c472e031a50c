"""Financial summary and cash-up schemas."""

from datetime import date as date_type
from decimal import Decimal
from typing import Optional

from pydantic import Field

from innflow.schemas.base import BaseSchema, IDMixin


class CashUpCreate(BaseSchema):
    """Register takings; the grand total is computed server-side."""

    cash: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    card: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    eft: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    notes: str = ""
    date: Optional[date_type] = None


class CashUpResponse(BaseSchema, IDMixin):
    date: date_type
    cash: Decimal
    card: Decimal
    eft: Decimal
    total: Decimal
    notes: str
    reconciled_by: str


class PaymentMixEntry(BaseSchema):
    name: str
    value: int


class FinancialSummary(BaseSchema):
    """Revenue excludes cancelled bookings; the payment mix includes all."""

    revenue: int
    paid: int
    pending: int
    payment_mix: list[PaymentMixEntry]
