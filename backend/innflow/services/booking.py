"""Booking creation, lifecycle changes and deletion.

Every mutation of a booking goes through this service so that pricing,
availability, references and state transitions are always decided by
``innflow.domain`` and always audited.
"""

import logging
from datetime import date
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.config import get_settings
from innflow.core.security import AuthenticatedUser
from innflow.domain import (
    compute_stay_total,
    find_conflict,
    initial_state,
    next_reference,
    nights_between,
    validate_payment_transition,
    validate_status_transition,
)
from innflow.models.booking import Booking
from innflow.models.enums import AuditAction, BookingStatus, PaymentStatus, RoomStatus
from innflow.models.property import Property, Room
from innflow.schemas.booking import BookingCreate
from innflow.services.audit import AuditService
from innflow.services.property import PropertyService

logger = logging.getLogger(__name__)


class BookingError(Exception):
    """Base error for booking operations."""


class RoomNotFoundError(BookingError):
    def __init__(self, room_id: UUID):
        self.room_id = room_id
        super().__init__(f"Room {room_id} not found")


class RoomUnavailableError(BookingError):
    """Requested dates clash with an existing stay, or the room is not bookable."""


class ReferenceConflictError(BookingError):
    """Another writer claimed the same reference; retry with a fresh counter."""


class DeletionNotConfirmedError(BookingError):
    pass


class BookingService:
    """Service for the booking lifecycle."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.properties = PropertyService(db)
        self.audit = AuditService(db)
        self.settings = get_settings()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get(self, booking_id: UUID) -> Optional[Booking]:
        result = await self.db.execute(select(Booking).where(Booking.id == booking_id))
        return result.scalar_one_or_none()

    async def list_bookings(
        self,
        q: Optional[str] = None,
        room_id: Optional[UUID] = None,
        status_filter: Optional[BookingStatus] = None,
    ) -> list[Booking]:
        """Newest first; ``q`` matches guest name or reference, case-insensitively."""
        query = select(Booking)
        if q:
            pattern = f"%{q.lower()}%"
            query = query.where(or_(
                Booking.guest_name.ilike(pattern),
                Booking.reference.ilike(pattern),
            ))
        if room_id:
            query = query.where(Booking.room_id == room_id)
        if status_filter:
            query = query.where(Booking.status == status_filter)

        result = await self.db.execute(query.order_by(Booking.created_at.desc()))
        return list(result.scalars().all())

    async def overlapping(
        self,
        room_id: UUID,
        check_in: date,
        check_out: date,
        lock: bool = False,
    ) -> Sequence[Booking]:
        """Candidate bookings on the room whose dates touch the range.

        The final overlap decision is left to ``innflow.domain``.
        """
        query = select(Booking).where(
            Booking.room_id == room_id,
            Booking.check_in_date < check_out,
            Booking.check_out_date > check_in,
        )
        if lock:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalars().all()

    async def quote(
        self,
        room: Room,
        check_in: date,
        check_out: date,
        prop: Property,
    ) -> dict:
        """Price and availability of a candidate stay, without side effects."""
        total = compute_stay_total(room, check_in, check_out, prop.seasonal_rates)
        base_total = compute_stay_total(room, check_in, check_out)
        existing = await self.overlapping(room.id, check_in, check_out)
        return {
            "room_id": room.id,
            "check_in_date": check_in,
            "check_out_date": check_out,
            "nights": nights_between(check_in, check_out),
            "base_total": base_total,
            "total_amount": total,
            "is_peak": total > base_total,
            "available": find_conflict(room.id, check_in, check_out, existing) is None,
        }

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create_booking(
        self,
        data: BookingCreate,
        current_user: AuthenticatedUser,
        require_active_room: bool = False,
    ) -> Booking:
        """Create a booking, retrying when a concurrent writer took the reference."""
        attempts = max(self.settings.booking_create_retries, 1)
        for attempt in range(1, attempts + 1):
            try:
                return await self._create_once(data, current_user, require_active_room)
            except ReferenceConflictError:
                logger.warning(f"[BOOKING] Reference conflict (attempt {attempt}/{attempts})")
                if attempt == attempts:
                    raise
        raise ReferenceConflictError("Could not allocate a booking reference")

    async def _create_once(
        self,
        data: BookingCreate,
        current_user: AuthenticatedUser,
        require_active_room: bool,
    ) -> Booking:
        # Single transaction: lock property -> check overlap -> price -> reference -> insert
        prop = await self.properties.get_property(for_update=True)

        room = await self.properties.get_room(data.room_id)
        if not room:
            raise RoomNotFoundError(data.room_id)
        if require_active_room and room.status != RoomStatus.ACTIVE:
            raise RoomUnavailableError(f"Room {room.room_number} is not open for booking")

        existing = await self.overlapping(room.id, data.check_in_date, data.check_out_date, lock=True)
        conflict = find_conflict(room.id, data.check_in_date, data.check_out_date, existing)
        if conflict:
            raise RoomUnavailableError(
                f"Room {room.room_number} is already booked ({conflict.reference}) for those dates"
            )

        total = compute_stay_total(room, data.check_in_date, data.check_out_date, prop.seasonal_rates)
        status, payment_status = initial_state(data.payment_method)
        reference, prop = next_reference(prop, prefix=self.settings.reference_prefix)

        booking = Booking(
            property_id=prop.id,
            reference=reference,
            guest_name=data.guest_name,
            guest_email=data.guest_email,
            guest_phone=data.guest_phone,
            guest_count=data.guest_count,
            guest_id_number=data.guest_id_number,
            room_id=room.id,
            check_in_date=data.check_in_date,
            check_out_date=data.check_out_date,
            total_amount=total,
            status=status,
            payment_status=payment_status,
            payment_method=data.payment_method,
        )
        self.db.add(booking)
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            raise ReferenceConflictError(str(e)) from e

        await self.audit.log(
            action=AuditAction.BOOKING_CREATED,
            details=f"{status.value.title()} stay {reference} for {booking.guest_name}",
            property_id=prop.id,
            actor=current_user.actor,
            user_id=current_user.user_id,
        )
        await self.db.commit()

        logger.info(f"[BOOKING] Created {reference} room={room.room_number} total={total}")
        return booking

    async def update_status(
        self,
        booking: Booking,
        target: BookingStatus,
        current_user: AuthenticatedUser,
    ) -> Booking:
        """Move a booking along its lifecycle. Same-status updates are no-ops."""
        if booking.status == target:
            return booking
        validate_status_transition(booking.status, target)

        before = booking.status
        booking.status = target
        await self.audit.log_status_change(
            reference=booking.reference,
            field="status",
            before=before.value,
            after=target.value,
            property_id=booking.property_id,
            actor=current_user.actor,
            user_id=current_user.user_id,
        )
        await self.db.commit()
        return booking

    async def update_payment_status(
        self,
        booking: Booking,
        target: PaymentStatus,
        current_user: AuthenticatedUser,
    ) -> Booking:
        """Change the payment axis; never touches booking status."""
        if booking.payment_status == target:
            return booking
        validate_payment_transition(booking.payment_status, target)

        before = booking.payment_status
        booking.payment_status = target
        await self.audit.log_status_change(
            reference=booking.reference,
            field="payment_status",
            before=before.value,
            after=target.value,
            property_id=booking.property_id,
            actor=current_user.actor,
            user_id=current_user.user_id,
        )
        await self.db.commit()
        return booking

    async def delete_booking(
        self,
        booking: Booking,
        current_user: AuthenticatedUser,
        confirmed: bool = False,
    ) -> None:
        """Hard-delete a booking in any state. Requires explicit confirmation."""
        if not confirmed:
            raise DeletionNotConfirmedError(
                f"Deleting {booking.reference} is permanent; repeat with confirm=true"
            )

        reference = booking.reference
        property_id = booking.property_id
        await self.db.delete(booking)
        await self.audit.log(
            action=AuditAction.BOOKING_DELETED,
            details=f"Deleted booking record {reference}",
            property_id=property_id,
            actor=current_user.actor,
            user_id=current_user.user_id,
        )
        await self.db.commit()
        logger.info(f"[BOOKING] Deleted {reference}")
