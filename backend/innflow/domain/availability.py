"""Room availability over half-open date ranges."""

from datetime import date
from typing import Any, Iterable, Optional

from innflow.models.enums import BookingStatus


def ranges_overlap(start_a: date, end_a: date, start_b: date, end_b: date) -> bool:
    """Half-open overlap test: [start_a, end_a) intersects [start_b, end_b)."""
    return start_a < end_b and end_a > start_b


def blocks_room(booking: Any) -> bool:
    return booking.status != BookingStatus.CANCELLED


def find_conflict(
    room_id: Any,
    check_in: date,
    check_out: date,
    existing_bookings: Iterable[Any],
) -> Optional[Any]:
    """First non-cancelled booking on ``room_id`` overlapping the candidate range."""
    for booking in existing_bookings:
        if booking.room_id != room_id or not blocks_room(booking):
            continue
        if ranges_overlap(check_in, check_out, booking.check_in_date, booking.check_out_date):
            return booking
    return None


def is_room_available(
    room_id: Any,
    check_in: date,
    check_out: date,
    existing_bookings: Iterable[Any],
) -> bool:
    """True when no non-cancelled booking on the room overlaps [check_in, check_out)."""
    return find_conflict(room_id, check_in, check_out, existing_bookings) is None


def occupying_booking(room_id: Any, night: date, bookings: Iterable[Any]) -> Optional[Any]:
    """Booking occupying ``room_id`` on ``night`` (check-in <= night < check-out)."""
    for booking in bookings:
        if (
            booking.room_id == room_id
            and blocks_room(booking)
            and booking.check_in_date <= night < booking.check_out_date
        ):
            return booking
    return None
