"""Property settings, seasonal rate and room schemas."""

from datetime import date
from decimal import Decimal
from typing import Annotated, ClassVar, Optional
from uuid import UUID

from pydantic import AnyUrl, Field, UrlConstraints, model_validator

from innflow.models.enums import RoomStatus
from innflow.schemas.base import BaseSchema, IDMixin, PartialUpdateSchema, TimestampMixin

WebhookUrl = Annotated[
    AnyUrl,
    UrlConstraints(max_length=500, allowed_schemes=["http", "https"], host_required=True),
]


class RoomPosition(BaseSchema):
    """A room's tile on the portal layout grid."""

    room_id: UUID
    x: int = Field(ge=0)
    y: int = Field(ge=0)
    w: int = Field(default=1, ge=1)
    h: int = Field(default=1, ge=1)


class SeasonalRateCreate(BaseSchema):
    """Append a seasonal rate to the end of the property's list."""

    name: str = Field(min_length=1, max_length=100)
    start_date: date
    end_date: date
    multiplier: Decimal = Field(ge=0, max_digits=6, decimal_places=3)

    @model_validator(mode="after")
    def validate_range(self):
        """Inclusive range: end may equal start."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class SeasonalRateUpdate(PartialUpdateSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    multiplier: Optional[Decimal] = Field(None, ge=0, max_digits=6, decimal_places=3)


class SeasonalRateResponse(BaseSchema, IDMixin):
    name: str
    start_date: date
    end_date: date
    multiplier: Decimal
    position: int


class PropertyUpdate(PartialUpdateSchema):
    """Partial update of branding, contact and messaging settings.

    Image and webhook URLs may be cleared with null.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"logo_url", "header_image_url", "webhook_url"})

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = Field(None, max_length=500)
    contact_email: Optional[str] = Field(None, max_length=255)
    contact_phone: Optional[str] = Field(None, max_length=50)
    staff_whatsapp: Optional[str] = Field(None, max_length=50)
    check_in_time: Optional[str] = Field(None, pattern=r"^\d{2}:\d{2}$")
    check_out_time: Optional[str] = Field(None, pattern=r"^\d{2}:\d{2}$")
    primary_color: Optional[str] = Field(None, pattern=r"^#[0-9A-Fa-f]{6}$")
    logo_url: Optional[str] = Field(None, max_length=500)
    header_image_url: Optional[str] = Field(None, max_length=500)
    whatsapp_template: Optional[str] = None
    webhook_url: Optional[WebhookUrl] = None


class PropertyResponse(BaseSchema, IDMixin, TimestampMixin):
    name: str
    address: str
    contact_email: str
    contact_phone: str
    staff_whatsapp: str
    check_in_time: str
    check_out_time: str
    primary_color: str
    logo_url: Optional[str] = None
    header_image_url: Optional[str] = None
    whatsapp_template: str
    webhook_url: Optional[str] = None
    layout_grid: list[RoomPosition] = []
    seasonal_rates: list[SeasonalRateResponse] = []
    last_ref_number: int


class RoomCreate(BaseSchema):
    room_number: str = Field(min_length=1, max_length=20)
    room_type: str = Field(min_length=1, max_length=100)
    capacity: int = Field(default=2, ge=1, le=50)
    price_per_night: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    status: RoomStatus = RoomStatus.ACTIVE
    description: str = ""
    images: list[str] = []


class RoomUpdate(PartialUpdateSchema):
    room_number: Optional[str] = Field(None, min_length=1, max_length=20)
    room_type: Optional[str] = Field(None, min_length=1, max_length=100)
    capacity: Optional[int] = Field(None, ge=1, le=50)
    price_per_night: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    status: Optional[RoomStatus] = None
    description: Optional[str] = None
    images: Optional[list[str]] = None


class RoomResponse(BaseSchema, IDMixin):
    property_id: UUID
    room_number: str
    room_type: str
    capacity: int
    price_per_night: Decimal
    status: RoomStatus
    description: str
    images: list[str] = []


class RoomListResponse(BaseSchema):
    """Room catalogue with per-status counts for the filter tabs."""

    rooms: list[RoomResponse]
    counts: dict[str, int]
