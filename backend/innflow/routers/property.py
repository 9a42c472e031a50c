"""Property router - settings, portal layout and seasonal rates."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.database import get_db
from innflow.core.security import require_admin, AuthenticatedUser
from innflow.models.enums import AuditAction
from innflow.models.property import Property, SeasonalRate
from innflow.schemas.property import (
    PropertyResponse,
    PropertyUpdate,
    RoomPosition,
    SeasonalRateCreate,
    SeasonalRateResponse,
    SeasonalRateUpdate,
)
from innflow.services.audit import AuditService
from innflow.services.property import PropertyService

router = APIRouter(prefix="/property", tags=["property"])


async def _log_settings(
    db: AsyncSession,
    prop: Property,
    details: str,
    current_user: AuthenticatedUser,
) -> None:
    await AuditService(db).log(
        action=AuditAction.SETTINGS_UPDATED,
        details=details,
        property_id=prop.id,
        actor=current_user.actor,
        user_id=current_user.user_id,
    )


def _find_rate(prop: Property, rate_id: UUID) -> SeasonalRate:
    for rate in prop.seasonal_rates:
        if rate.id == rate_id:
            return rate
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Seasonal rate not found")


@router.get("", response_model=PropertyResponse)
async def get_property(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Get the property configuration."""
    return await PropertyService(db).get_property()


@router.patch("", response_model=PropertyResponse)
async def update_property(
    data: PropertyUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Update branding, contact details, message template or webhook."""
    prop = await PropertyService(db).get_property()

    # URLs are stored as plain strings
    for field, value in data.model_dump(mode="json", exclude_unset=True).items():
        setattr(prop, field, value)

    await _log_settings(db, prop, "Global property configuration committed", current_user)
    await db.commit()
    return prop


@router.put("/layout", response_model=PropertyResponse)
async def update_layout(
    data: list[RoomPosition],
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Replace the portal room layout grid."""
    prop = await PropertyService(db).get_property()
    prop.layout_grid = [position.model_dump(mode="json") for position in data]

    await _log_settings(db, prop, f"Room layout updated ({len(data)} tiles)", current_user)
    await db.commit()
    return prop


@router.get("/seasonal-rates", response_model=list[SeasonalRateResponse])
async def list_seasonal_rates(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Seasonal rates in pricing order (first match wins)."""
    prop = await PropertyService(db).get_property()
    return prop.seasonal_rates


@router.post("/seasonal-rates", response_model=SeasonalRateResponse, status_code=status.HTTP_201_CREATED)
async def create_seasonal_rate(
    data: SeasonalRateCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Append a seasonal rate; it loses ties to every existing rate."""
    prop = await PropertyService(db).get_property()
    position = max((r.position for r in prop.seasonal_rates), default=-1) + 1

    rate = SeasonalRate(**data.model_dump(), position=position)
    prop.seasonal_rates.append(rate)
    await db.flush()

    await _log_settings(db, prop, f"Seasonal rate '{rate.name}' added (x{rate.multiplier})", current_user)
    await db.commit()
    return rate


@router.patch("/seasonal-rates/{rate_id}", response_model=SeasonalRateResponse)
async def update_seasonal_rate(
    rate_id: UUID,
    data: SeasonalRateUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Update a seasonal rate in place (its position is kept)."""
    prop = await PropertyService(db).get_property()
    rate = _find_rate(prop, rate_id)

    changes = data.model_dump(exclude_unset=True)
    start = changes.get("start_date", rate.start_date)
    end = changes.get("end_date", rate.end_date)
    if end < start:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="end_date must not be before start_date",
        )

    for field, value in changes.items():
        setattr(rate, field, value)

    await _log_settings(db, prop, f"Seasonal rate '{rate.name}' updated", current_user)
    await db.commit()
    return rate


@router.delete("/seasonal-rates/{rate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_seasonal_rate(
    rate_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Remove a seasonal rate. Existing booking totals are not recomputed."""
    prop = await PropertyService(db).get_property()
    rate = _find_rate(prop, rate_id)
    name = rate.name

    prop.seasonal_rates.remove(rate)
    await _log_settings(db, prop, f"Seasonal rate '{name}' removed", current_user)
    await db.commit()
