"""Bookings router - reservations and their lifecycle."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.database import get_db
from innflow.core.security import require_staff, AuthenticatedUser
from innflow.domain import InvalidTransitionError
from innflow.models.booking import Booking
from innflow.models.enums import BookingStatus
from innflow.schemas.booking import (
    BookingCreate,
    BookingPaymentUpdate,
    BookingResponse,
    BookingStatusUpdate,
    MISSING_ROOM_LABEL,
)
from innflow.services.booking import (
    BookingError,
    BookingService,
    DeletionNotConfirmedError,
    ReferenceConflictError,
    RoomNotFoundError,
    RoomUnavailableError,
)
from innflow.services.notifications import WhatsAppDispatcher, get_whatsapp_dispatcher
from innflow.services.property import PropertyService

router = APIRouter(prefix="/bookings", tags=["bookings"])


def booking_response(booking: Booking, room_numbers: dict) -> BookingResponse:
    """Serialize a booking; a deleted room renders as N/A."""
    response = BookingResponse.model_validate(booking)
    response.room_number = room_numbers.get(booking.room_id, MISSING_ROOM_LABEL)
    return response


def http_error(e: Exception) -> HTTPException:
    """Map booking service errors onto HTTP responses."""
    if isinstance(e, RoomNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, (RoomUnavailableError, ReferenceConflictError)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


async def create_and_notify(
    data: BookingCreate,
    db: AsyncSession,
    current_user: AuthenticatedUser,
    dispatcher: WhatsAppDispatcher,
    require_active_room: bool = False,
) -> BookingResponse:
    """Create a booking, then send the guest confirmation after commit."""
    service = BookingService(db)
    try:
        booking = await service.create_booking(data, current_user, require_active_room)
    except BookingError as e:
        raise http_error(e)

    properties = PropertyService(db)
    response = booking_response(booking, await properties.room_numbers())

    # Booking is committed; delivery outcome is recorded but never propagated
    prop = await properties.get_property()
    await dispatcher.dispatch_booking(db, booking, prop, current_user)
    return response


async def get_booking_or_404(booking_id: UUID, service: BookingService) -> Booking:
    booking = await service.get(booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@router.get("", response_model=list[BookingResponse])
async def list_bookings(
    q: Optional[str] = Query(None, description="Search guest name or reference"),
    room_id: Optional[UUID] = None,
    status_filter: Optional[BookingStatus] = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """List bookings, newest first."""
    bookings = await BookingService(db).list_bookings(q=q, room_id=room_id, status_filter=status_filter)
    numbers = await PropertyService(db).room_numbers()
    return [booking_response(b, numbers) for b in bookings]


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    data: BookingCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
    dispatcher: WhatsAppDispatcher = Depends(get_whatsapp_dispatcher),
):
    """Create a booking from the back office.

    Price, reference and initial status are decided server-side.
    """
    return await create_and_notify(data, db, current_user, dispatcher)


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """Get a booking by ID."""
    booking = await get_booking_or_404(booking_id, BookingService(db))
    return booking_response(booking, await PropertyService(db).room_numbers())


async def _change_status(
    booking_id: UUID,
    target: BookingStatus,
    db: AsyncSession,
    current_user: AuthenticatedUser,
) -> BookingResponse:
    service = BookingService(db)
    booking = await get_booking_or_404(booking_id, service)
    try:
        booking = await service.update_status(booking, target, current_user)
    except InvalidTransitionError as e:
        raise http_error(e)
    return booking_response(booking, await PropertyService(db).room_numbers())


@router.patch("/{booking_id}/status", response_model=BookingResponse)
async def update_booking_status(
    booking_id: UUID,
    data: BookingStatusUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """Move a booking along its lifecycle."""
    return await _change_status(booking_id, data.status, db, current_user)


@router.post("/{booking_id}/check-in", response_model=BookingResponse)
async def check_in(
    booking_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """Check the guest in from PROVISIONAL or CONFIRMED."""
    return await _change_status(booking_id, BookingStatus.CHECKED_IN, db, current_user)


@router.post("/{booking_id}/check-out", response_model=BookingResponse)
async def check_out(
    booking_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """Check the guest out (CHECKED_IN -> CHECKED_OUT)."""
    return await _change_status(booking_id, BookingStatus.CHECKED_OUT, db, current_user)


@router.patch("/{booking_id}/payment", response_model=BookingResponse)
async def update_payment_status(
    booking_id: UUID,
    data: BookingPaymentUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """Record a payment status change. Booking status is left alone."""
    service = BookingService(db)
    booking = await get_booking_or_404(booking_id, service)
    try:
        booking = await service.update_payment_status(booking, data.payment_status, current_user)
    except InvalidTransitionError as e:
        raise http_error(e)
    return booking_response(booking, await PropertyService(db).room_numbers())


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_booking(
    booking_id: UUID,
    confirm: bool = Query(False, description="Must be true; deletion is permanent"),
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """Permanently delete a booking in any state."""
    service = BookingService(db)
    booking = await get_booking_or_404(booking_id, service)
    try:
        await service.delete_booking(booking, current_user, confirmed=confirm)
    except DeletionNotConfirmedError as e:
        raise http_error(e)
