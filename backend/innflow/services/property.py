"""Property singleton access and first-run seeding."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.config import get_settings
from innflow.models.enums import RoomStatus
from innflow.models.property import Property, Room, SeasonalRate

logger = logging.getLogger(__name__)

DEFAULT_PROPERTY = {
    "name": "Ocean Whisper Lodge",
    "address": "123 Beachfront Dr, Cape Town",
    "contact_email": "hello@oceanwhisper.com",
    "contact_phone": "+27 82 000 0000",
    "staff_whatsapp": "+27 82 111 2222",
    "check_in_time": "14:00",
    "check_out_time": "10:00",
    "primary_color": "#3B82F6",
}

DEMO_SEASONAL_RATES = [
    ("Peak Summer", date(2024, 12, 1), date(2025, 1, 31), Decimal("1.4")),
    ("Easter Special", date(2024, 4, 10), date(2024, 4, 20), Decimal("1.25")),
]

DEMO_ROOMS = [
    ("101", "Deluxe Suite", 2, Decimal("1200"), "Sea facing view with private balcony.", (0, 0, 2, 2)),
    ("102", "Standard Room", 2, Decimal("850"), "Cozy room with double bed.", (2, 0, 2, 2)),
    ("103", "Family Suite", 4, Decimal("1800"), "Large unit with kitchenette.", (0, 2, 4, 2)),
    ("201", "Executive King", 2, Decimal("1500"), "Premium luxury for business travelers.", (4, 0, 2, 4)),
]
DEMO_LAST_REF_NUMBER = 12


class PropertyService:
    """Access to the deployment's single property row."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_property(self, for_update: bool = False) -> Property:
        """Return the property, creating it on first access.

        ``for_update`` takes a row lock for the rest of the transaction; the
        booking flow uses it to serialize reference counter increments.
        """
        query = select(Property).order_by(Property.created_at).limit(1)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        prop = result.scalar_one_or_none()
        if prop:
            return prop
        return await self._create_default()

    async def _create_default(self) -> Property:
        settings = get_settings()
        # Collection initialized in memory so it never needs a lazy load
        prop = Property(**DEFAULT_PROPERTY, layout_grid=[], last_ref_number=0, seasonal_rates=[])
        self.db.add(prop)
        await self.db.flush()

        if settings.seed_demo_data:
            await self._seed_demo(prop)
            await self.db.flush()

        logger.info(f"[PROPERTY] Created default property {prop.id} (demo={settings.seed_demo_data})")
        return prop

    async def _seed_demo(self, prop: Property) -> None:
        for position, (name, start, end, multiplier) in enumerate(DEMO_SEASONAL_RATES):
            prop.seasonal_rates.append(SeasonalRate(
                name=name,
                start_date=start,
                end_date=end,
                multiplier=multiplier,
                position=position,
            ))

        layout = []
        for number, room_type, capacity, price, description, (x, y, w, h) in DEMO_ROOMS:
            room = Room(
                property_id=prop.id,
                room_number=number,
                room_type=room_type,
                capacity=capacity,
                price_per_night=price,
                status=RoomStatus.ACTIVE,
                description=description,
                images=[],
            )
            self.db.add(room)
            await self.db.flush()
            layout.append({"room_id": str(room.id), "x": x, "y": y, "w": w, "h": h})

        prop.layout_grid = layout
        prop.last_ref_number = DEMO_LAST_REF_NUMBER

    async def get_room(self, room_id) -> Optional[Room]:
        result = await self.db.execute(select(Room).where(Room.id == room_id))
        return result.scalar_one_or_none()

    async def room_numbers(self) -> dict:
        """room_id -> room_number for rendering booking lists."""
        result = await self.db.execute(select(Room.id, Room.room_number))
        return {room_id: number for room_id, number in result.all()}
