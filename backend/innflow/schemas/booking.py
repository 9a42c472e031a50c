"""Booking schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field, model_validator

from innflow.models.enums import BookingStatus, PaymentStatus, PaymentMethod
from innflow.schemas.base import BaseSchema, IDMixin, TimestampMixin

MISSING_ROOM_LABEL = "N/A"


class StayDates(BaseSchema):
    check_in_date: date
    check_out_date: date

    @model_validator(mode="after")
    def validate_dates(self):
        """Check-out must be after check-in."""
        if self.check_out_date <= self.check_in_date:
            raise ValueError("check_out_date must be after check_in_date")
        return self


class BookingCreate(StayDates):
    """Create a booking. Price, reference and initial status are server-side."""

    room_id: UUID
    guest_name: str = Field(min_length=1, max_length=255)
    guest_email: str = Field(default="", max_length=255)
    guest_phone: str = Field(default="", max_length=50)
    guest_count: Optional[int] = Field(None, ge=1, le=50)
    guest_id_number: Optional[str] = Field(None, max_length=50)
    payment_method: Optional[PaymentMethod] = None


class BookingStatusUpdate(BaseSchema):
    status: BookingStatus


class BookingPaymentUpdate(BaseSchema):
    payment_status: PaymentStatus


class BookingResponse(BaseSchema, IDMixin, TimestampMixin):
    """Booking response."""

    property_id: UUID
    reference: str
    guest_name: str
    guest_email: str
    guest_phone: str
    guest_count: Optional[int] = None
    guest_id_number: Optional[str] = None
    room_id: UUID
    room_number: str = MISSING_ROOM_LABEL
    check_in_date: date
    check_out_date: date
    total_amount: int
    status: BookingStatus
    payment_status: PaymentStatus
    payment_method: Optional[PaymentMethod] = None


class QuoteResponse(BaseSchema):
    """Price and availability of a candidate stay."""

    room_id: UUID
    check_in_date: date
    check_out_date: date
    nights: int
    base_total: int
    total_amount: int
    is_peak: bool
    available: bool


class CalendarCell(BaseSchema):
    night: date
    booking_id: UUID
    reference: str
    guest_name: str
    status: BookingStatus
    payment_status: PaymentStatus


class CalendarRow(BaseSchema):
    room_id: UUID
    room_number: str
    room_type: str
    price_per_night: Decimal
    occupied: list[CalendarCell]


class CalendarResponse(BaseSchema):
    year: int
    month: int
    days: int
    rows: list[CalendarRow]
    generated_at: datetime
