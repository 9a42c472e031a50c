"""Guest portal router - branding, room map, quotes and self-service booking."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.database import get_db
from innflow.core.security import get_current_user, AuthenticatedUser
from innflow.models.enums import RoomStatus
from innflow.models.property import Room
from innflow.routers.bookings import create_and_notify
from innflow.routers.calendar import build_quote
from innflow.schemas.booking import BookingCreate, BookingResponse, QuoteResponse
from innflow.schemas.property import RoomResponse
from innflow.services.notifications import WhatsAppDispatcher, get_whatsapp_dispatcher
from innflow.services.property import PropertyService

router = APIRouter(prefix="/portal", tags=["portal"])


@router.get("")
async def get_portal(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
):
    """Public-facing property details, bookable rooms and the room map."""
    prop = await PropertyService(db).get_property()
    result = await db.execute(
        select(Room).where(Room.status == RoomStatus.ACTIVE).order_by(Room.room_number)
    )
    return {
        "name": prop.name,
        "address": prop.address,
        "contact_email": prop.contact_email,
        "contact_phone": prop.contact_phone,
        "check_in_time": prop.check_in_time,
        "check_out_time": prop.check_out_time,
        "primary_color": prop.primary_color,
        "logo_url": prop.logo_url,
        "header_image_url": prop.header_image_url,
        "layout_grid": prop.layout_grid,
        "rooms": [RoomResponse.model_validate(r) for r in result.scalars().all()],
    }


@router.get("/quote", response_model=QuoteResponse)
async def portal_quote(
    room_id: UUID,
    check_in: date,
    check_out: date,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
):
    """Price a stay for the guest."""
    return await build_quote(db, room_id, check_in, check_out)


@router.post("/bookings", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def book_stay(
    data: BookingCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_user),
    dispatcher: WhatsAppDispatcher = Depends(get_whatsapp_dispatcher),
):
    """Book an active room. Paying by iKhokha confirms immediately."""
    return await create_and_notify(data, db, current_user, dispatcher, require_active_room=True)
