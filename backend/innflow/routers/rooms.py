"""Rooms router - room inventory CRUD and maintenance toggling."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.database import get_db
from innflow.core.security import require_admin, require_staff, AuthenticatedUser
from innflow.models.enums import AuditAction, RoomStatus
from innflow.models.property import Room
from innflow.schemas.property import RoomCreate, RoomListResponse, RoomResponse, RoomUpdate
from innflow.services.audit import AuditService
from innflow.services.property import PropertyService

router = APIRouter(prefix="/rooms", tags=["rooms"])


async def get_room_or_404(room_id: UUID, db: AsyncSession) -> Room:
    room = await PropertyService(db).get_room(room_id)
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    return room


def room_counts(rooms: list[Room]) -> dict[str, int]:
    """Per-status counts over the whole inventory, plus ALL."""
    counts = {"ALL": len(rooms)}
    for room_status in RoomStatus:
        counts[room_status.value] = sum(1 for r in rooms if r.status == room_status)
    return counts


@router.get("", response_model=RoomListResponse)
async def list_rooms(
    status_filter: Optional[RoomStatus] = Query(None, alias="status"),
    q: Optional[str] = Query(None, description="Search room number or type"),
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """List rooms with optional status filter and search.

    Counts always cover the full inventory so filter tabs stay stable.
    """
    result = await db.execute(select(Room).order_by(Room.room_number))
    rooms = list(result.scalars().all())

    needle = (q or "").lower()
    filtered = [
        r for r in rooms
        if (status_filter is None or r.status == status_filter)
        and (needle in r.room_number.lower() or needle in r.room_type.lower())
    ]
    return RoomListResponse(
        rooms=[RoomResponse.model_validate(r) for r in filtered],
        counts=room_counts(rooms),
    )


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def create_room(
    data: RoomCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Add a room to the inventory."""
    prop = await PropertyService(db).get_property()

    room = Room(property_id=prop.id, **data.model_dump())
    db.add(room)
    await db.flush()

    await AuditService(db).log(
        action=AuditAction.ROOM_CREATED,
        details=f"Added room {room.room_number} ({room.room_type})",
        property_id=prop.id,
        actor=current_user.actor,
        user_id=current_user.user_id,
    )
    await db.commit()
    return room


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(
    room_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_staff),
):
    """Get a room by ID."""
    return await get_room_or_404(room_id, db)


@router.patch("/{room_id}", response_model=RoomResponse)
async def update_room(
    room_id: UUID,
    data: RoomUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Update a room. Price changes do not touch existing bookings."""
    room = await get_room_or_404(room_id, db)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(room, field, value)

    await AuditService(db).log(
        action=AuditAction.ROOM_UPDATED,
        details=f"Updated room {room.room_number}",
        property_id=room.property_id,
        actor=current_user.actor,
        user_id=current_user.user_id,
    )
    await db.commit()
    return room


@router.post("/{room_id}/toggle-maintenance", response_model=RoomResponse)
async def toggle_maintenance(
    room_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Flip a room between MAINTENANCE and ACTIVE (BLOCKED goes to MAINTENANCE)."""
    room = await get_room_or_404(room_id, db)
    room.status = RoomStatus.ACTIVE if room.status == RoomStatus.MAINTENANCE else RoomStatus.MAINTENANCE

    await AuditService(db).log(
        action=AuditAction.ROOM_UPDATED,
        details=f"Room {room.room_number} set to {room.status.value}",
        property_id=room.property_id,
        actor=current_user.actor,
        user_id=current_user.user_id,
    )
    await db.commit()
    return room


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_room(
    room_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Delete a room. Its bookings are kept and render room number N/A."""
    room = await get_room_or_404(room_id, db)
    property_id = room.property_id
    number = room.room_number

    await db.delete(room)
    await AuditService(db).log(
        action=AuditAction.ROOM_DELETED,
        details=f"Removed room {number}",
        property_id=property_id,
        actor=current_user.actor,
        user_id=current_user.user_id,
    )
    await db.commit()
