"""Financials router - revenue summary, ledger export and register cash-ups."""

import logging
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response, StreamingResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.config import get_settings
from innflow.core.database import get_db
from innflow.core.security import require_admin, AuthenticatedUser
from innflow.models.booking import Booking
from innflow.models.cash_up import CashUpRecord
from innflow.models.enums import AuditAction
from innflow.schemas.financial import CashUpCreate, CashUpResponse, FinancialSummary
from innflow.services.audit import AuditService
from innflow.services.ledger import format_amount, ledger_csv, payment_mix, revenue_summary
from innflow.services.pdf_generator import PDFGenerator
from innflow.services.property import PropertyService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/financials", tags=["financials"])


async def _all_bookings(db: AsyncSession) -> list[Booking]:
    result = await db.execute(select(Booking).order_by(Booking.created_at))
    return list(result.scalars().all())


@router.get("/summary", response_model=FinancialSummary)
async def get_summary(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Revenue, paid and pending totals plus the payment-method mix."""
    bookings = await _all_bookings(db)
    return FinancialSummary(**revenue_summary(bookings), payment_mix=payment_mix(bookings))


@router.get("/export.csv")
async def export_ledger(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Download the master ledger as CSV."""
    prop = await PropertyService(db).get_property()
    content = ledger_csv(await _all_bookings(db))

    await AuditService(db).log(
        action=AuditAction.FINANCIAL_EXPORT,
        details="Full ledger exported to CSV",
        property_id=prop.id,
        actor=current_user.actor,
        user_id=current_user.user_id,
    )
    await db.commit()

    filename = f"innflow_report_{datetime.utcnow().date().isoformat()}.csv"
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/cash-ups", response_model=list[CashUpResponse])
async def list_cash_ups(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Cash-up history, newest first."""
    result = await db.execute(
        select(CashUpRecord).order_by(CashUpRecord.created_at.desc())
    )
    return result.scalars().all()


@router.post("/cash-ups", response_model=CashUpResponse, status_code=status.HTTP_201_CREATED)
async def create_cash_up(
    data: CashUpCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Close the register. The grand total is computed here, never trusted from input."""
    prop = await PropertyService(db).get_property()
    total = data.cash + data.card + data.eft

    record = CashUpRecord(
        property_id=prop.id,
        date=data.date or datetime.utcnow().date(),
        cash=data.cash,
        card=data.card,
        eft=data.eft,
        total=total,
        notes=data.notes,
        reconciled_by=current_user.name,
    )
    db.add(record)
    await db.flush()

    settings = get_settings()
    await AuditService(db).log(
        action=AuditAction.FINANCIAL_CASH_UP,
        details=(
            f"Closed register for {record.date.isoformat()}. "
            f"Reconciled {settings.currency_symbol}{format_amount(total)}"
        ),
        property_id=prop.id,
        actor=current_user.actor,
        user_id=current_user.user_id,
    )
    await db.commit()
    return record


@router.get("/cash-ups/{cash_up_id}/pdf")
async def download_cash_up_pdf(
    cash_up_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_admin),
):
    """Download a printable cash-up statement."""
    result = await db.execute(select(CashUpRecord).where(CashUpRecord.id == cash_up_id))
    record = result.scalar_one_or_none()
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cash-up not found")

    prop = await PropertyService(db).get_property()
    generator = PDFGenerator(currency_symbol=get_settings().currency_symbol)
    pdf_bytes = generator.generate_cash_up_statement(
        prop.name,
        {
            "date": record.date.isoformat(),
            "cash": record.cash,
            "card": record.card,
            "eft": record.eft,
            "total": record.total,
            "notes": record.notes,
            "reconciled_by": record.reconciled_by,
        },
    )
    logger.info(f"[FINANCIALS] Generated cash-up statement for {record.date}")

    filename = f"cash_up_{record.date.isoformat()}.pdf"
    return StreamingResponse(
        iter([pdf_bytes]),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
