"""Calendar router - monthly occupancy grid and quick quotes."""

import calendar as month_calendar
from datetime import date, datetime, timedelta
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.database import get_db
from innflow.core.security import require_staff, AuthenticatedUser
from innflow.domain import occupying_booking
from innflow.models.booking import Booking
from innflow.models.enums import BookingStatus
from innflow.models.property import Room
from innflow.schemas.booking import CalendarCell, CalendarResponse, CalendarRow, QuoteResponse
from innflow.services.booking import BookingService
from innflow.services.property import PropertyService

router = APIRouter(prefix="/calendar", tags=["calendar"])


async def build_quote(
    db: AsyncSession,
    room_id: UUID,
    check_in: date,
    check_out: date,
) -> QuoteResponse:
    """Shared by the back office and the guest portal."""
    if check_out <= check_in:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="check_out must be after check_in",
        )
    properties = PropertyService(db)
    room = await properties.get_room(room_id)
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")

    prop = await properties.get_property()
    quote = await BookingService(db).quote(room, check_in, check_out, prop)
    return QuoteResponse(**quote)


@router.get("", response_model=CalendarResponse)
async def get_calendar(
    year: Optional[int] = Query(None, ge=1970, le=9998),
    month: Optional[int] = Query(None, ge=1, le=12),
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """Room x night occupancy for one month (defaults to the current month).

    A night is occupied when check-in <= night < check-out; cancelled
    bookings never occupy.
    """
    today = date.today()
    year = year or today.year
    month = month or today.month
    days = month_calendar.monthrange(year, month)[1]
    first = date(year, month, 1)
    after_last = first + timedelta(days=days)

    rooms = (await db.execute(select(Room).order_by(Room.room_number))).scalars().all()
    bookings = (await db.execute(
        select(Booking).where(
            Booking.status != BookingStatus.CANCELLED,
            Booking.check_in_date < after_last,
            Booking.check_out_date > first,
        )
    )).scalars().all()

    rows = []
    for room in rooms:
        cells = []
        for offset in range(days):
            night = first + timedelta(days=offset)
            booking = occupying_booking(room.id, night, bookings)
            if booking:
                cells.append(CalendarCell(
                    night=night,
                    booking_id=booking.id,
                    reference=booking.reference,
                    guest_name=booking.guest_name,
                    status=booking.status,
                    payment_status=booking.payment_status,
                ))
        rows.append(CalendarRow(
            room_id=room.id,
            room_number=room.room_number,
            room_type=room.room_type,
            price_per_night=room.price_per_night,
            occupied=cells,
        ))

    return CalendarResponse(
        year=year,
        month=month,
        days=days,
        rows=rows,
        generated_at=datetime.utcnow(),
    )


@router.get("/quote", response_model=QuoteResponse)
async def quick_quote(
    room_id: UUID,
    check_in: date,
    check_out: date,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """Price a stay before booking it. ``is_peak`` flags seasonal uplift."""
    return await build_quote(db, room_id, check_in, check_out)
