"""Dashboard router - today's operations and revenue overview."""

from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP

from fastapi import APIRouter, Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.database import get_db
from innflow.core.security import require_staff, AuthenticatedUser
from innflow.models.booking import Booking
from innflow.models.enums import BookingStatus
from innflow.models.property import Room
from innflow.routers.bookings import booking_response
from innflow.services.property import PropertyService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

RECENT_ACTIVE_LIMIT = 4


@router.get("")
async def get_dashboard(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """Aggregate dashboard statistics.

    Returns:
    - Check-ins / check-outs today (cancelled excluded)
    - Occupancy % (checked-in stays over total rooms)
    - Revenue across non-cancelled bookings
    - Available rooms (total rooms minus checked-in stays)
    - Revenue by booking creation date for the last 7 days
    - Most recent confirmed / checked-in stays
    """
    today = datetime.utcnow().date()

    total_rooms = (await db.execute(select(func.count(Room.id)))).scalar_one()
    bookings = (await db.execute(select(Booking).order_by(Booking.created_at))).scalars().all()
    valid = [b for b in bookings if b.status != BookingStatus.CANCELLED]
    checked_in = [b for b in bookings if b.status == BookingStatus.CHECKED_IN]

    occupancy = Decimal(0)
    if total_rooms:
        occupancy = Decimal(len(checked_in) * 100) / Decimal(total_rooms)

    revenue_series = []
    for days_ago in range(6, -1, -1):
        day = today - timedelta(days=days_ago)
        revenue_series.append({
            "date": day.isoformat(),
            "name": day.strftime("%a"),
            "revenue": sum(b.total_amount for b in valid if b.created_at.date() == day),
        })

    active = [b for b in bookings if b.status in (BookingStatus.CONFIRMED, BookingStatus.CHECKED_IN)]
    numbers = await PropertyService(db).room_numbers()

    return {
        "check_ins_today": sum(1 for b in valid if b.check_in_date == today),
        "check_outs_today": sum(1 for b in valid if b.check_out_date == today),
        "occupancy_rate": int(occupancy.quantize(Decimal("1"), rounding=ROUND_HALF_UP)),
        "total_revenue": sum(b.total_amount for b in valid),
        "total_rooms": total_rooms,
        "available_rooms": total_rooms - len(checked_in),
        "revenue_series": revenue_series,
        "recent_active": [
            booking_response(b, numbers)
            for b in reversed(active[-RECENT_ACTIVE_LIMIT:])
        ],
        "generated_at": datetime.utcnow().isoformat(),
    }
