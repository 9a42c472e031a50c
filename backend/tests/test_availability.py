"""Half-open overlap and room availability."""

from datetime import date
from types import SimpleNamespace
from uuid import uuid4

import pytest

from innflow.domain import find_conflict, is_room_available, occupying_booking, ranges_overlap
from innflow.models.enums import BookingStatus

ROOM = uuid4()
OTHER_ROOM = uuid4()


def make_booking(check_in, check_out, room_id=ROOM, status=BookingStatus.CONFIRMED):
    return SimpleNamespace(
        room_id=room_id,
        check_in_date=check_in,
        check_out_date=check_out,
        status=status,
        reference="INF-2024-0001",
    )


EXISTING = [make_booking(date(2024, 6, 10), date(2024, 6, 13))]


@pytest.mark.parametrize(
    "check_in, check_out, available",
    [
        (date(2024, 6, 13), date(2024, 6, 15), True),   # starts on existing check-out
        (date(2024, 6, 8), date(2024, 6, 10), True),    # ends on existing check-in
        (date(2024, 6, 12), date(2024, 6, 14), False),  # overlaps tail
        (date(2024, 6, 9), date(2024, 6, 11), False),   # overlaps head
        (date(2024, 6, 11), date(2024, 6, 12), False),  # inside
        (date(2024, 6, 1), date(2024, 6, 30), False),   # encloses
    ],
)
def test_half_open_boundaries(check_in, check_out, available):
    assert is_room_available(ROOM, check_in, check_out, EXISTING) is available


def test_cancelled_bookings_free_the_room():
    cancelled = [make_booking(date(2024, 6, 10), date(2024, 6, 13), status=BookingStatus.CANCELLED)]
    assert is_room_available(ROOM, date(2024, 6, 10), date(2024, 6, 13), cancelled)


def test_checked_out_and_provisional_still_block():
    for status in (BookingStatus.PROVISIONAL, BookingStatus.CHECKED_IN, BookingStatus.CHECKED_OUT):
        existing = [make_booking(date(2024, 6, 10), date(2024, 6, 13), status=status)]
        assert not is_room_available(ROOM, date(2024, 6, 11), date(2024, 6, 12), existing)


def test_other_rooms_do_not_conflict():
    existing = [make_booking(date(2024, 6, 10), date(2024, 6, 13), room_id=OTHER_ROOM)]
    assert is_room_available(ROOM, date(2024, 6, 10), date(2024, 6, 13), existing)


def test_find_conflict_returns_blocking_booking():
    conflict = find_conflict(ROOM, date(2024, 6, 12), date(2024, 6, 14), EXISTING)
    assert conflict is EXISTING[0]


def test_ranges_overlap_is_symmetric():
    a = (date(2024, 1, 1), date(2024, 1, 5))
    b = (date(2024, 1, 4), date(2024, 1, 8))
    assert ranges_overlap(*a, *b) and ranges_overlap(*b, *a)


def test_occupying_booking_excludes_checkout_night():
    booking = EXISTING[0]
    assert occupying_booking(ROOM, date(2024, 6, 10), EXISTING) is booking
    assert occupying_booking(ROOM, date(2024, 6, 12), EXISTING) is booking
    assert occupying_booking(ROOM, date(2024, 6, 13), EXISTING) is None
