"""
InnFlow - WhatsApp Notification Dispatcher

Sends the booking confirmation template to the guest through the
property's configured WhatsApp Cloud API webhook.

Dispatch happens after the booking is committed. Whatever the outcome, the
booking is never rolled back or retried; only a delivery record is written.
"""

import logging
from typing import Optional

import httpx
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from innflow.core.config import get_settings
from innflow.core.security import AuthenticatedUser
from innflow.domain import payment_link, render_message
from innflow.models.audit import NotificationRecord
from innflow.models.booking import Booking
from innflow.models.enums import AuditAction, DeliveryStatus, NotificationChannel
from innflow.models.property import Property
from innflow.services.audit import AuditService

logger = logging.getLogger(__name__)


class WhatsAppDispatcher:
    """Dispatches booking confirmations and records the delivery outcome."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        api_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.timeout = timeout if timeout is not None else settings.notification_timeout_seconds
        self.api_token = api_token if api_token is not None else settings.whatsapp_api_token
        self.template_name = settings.whatsapp_template_name
        self.link_base = settings.payment_link_base
        self.log_cap = settings.notification_log_cap
        self.transport = transport

    def build_payload(self, booking: Booking, link: str) -> dict:
        """WhatsApp Cloud API template message body."""
        return {
            "messaging_product": "whatsapp",
            "to": "".join(booking.guest_phone.split()),
            "type": "template",
            "template": {
                "name": self.template_name,
                "language": {"code": "en"},
                "components": [
                    {
                        "type": "body",
                        "parameters": [
                            {"type": "text", "text": booking.guest_name},
                            {"type": "text", "text": booking.reference},
                            {"type": "text", "text": link},
                        ],
                    }
                ],
            },
        }

    async def send(self, webhook_url: Optional[str], payload: dict) -> DeliveryStatus:
        """POST the payload. A missing or unusable URL and transport errors yield SIMULATED."""
        if not webhook_url:
            return DeliveryStatus.SIMULATED

        headers = {"Authorization": f"Bearer {self.api_token or 'MOCK_TOKEN'}"}
        try:
            url = httpx.URL(webhook_url)
            if url.scheme not in ("http", "https") or not url.host:
                raise httpx.InvalidURL(f"Not an absolute http(s) URL: {webhook_url!r}")
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(url, json=payload, headers=headers)
        except Exception:
            logger.exception("[WHATSAPP] Dispatch simulated, webhook request could not be made")
            return DeliveryStatus.SIMULATED

        if not response.is_success:
            logger.warning(f"[WHATSAPP] Webhook rejected message: {response.status_code}")
            return DeliveryStatus.FAILED
        return DeliveryStatus.DELIVERED

    async def dispatch_booking(
        self,
        db: AsyncSession,
        booking: Booking,
        prop: Property,
        current_user: Optional[AuthenticatedUser] = None,
    ) -> Optional[NotificationRecord]:
        """Render, send and record a confirmation. Never raises."""
        link = payment_link(self.link_base, booking.reference)
        message = render_message(prop.whatsapp_template, booking, prop.name, link)

        status = await self.send(prop.webhook_url, self.build_payload(booking, link))
        logger.info(f"[WHATSAPP] {booking.reference} -> {booking.guest_phone}: {status.value}")

        try:
            record = NotificationRecord(
                property_id=prop.id,
                booking_id=booking.id,
                channel=NotificationChannel.WHATSAPP,
                recipient=booking.guest_phone,
                message=message,
                status=status,
            )
            db.add(record)
            await db.flush()
            await self._evict(db, prop.id)

            # The webhook answered (either way): leave an audit trail
            if status != DeliveryStatus.SIMULATED and current_user:
                await AuditService(db).log(
                    action=AuditAction.WHATSAPP_DISPATCH,
                    details=f"Notification sent for {booking.reference} to {booking.guest_phone}",
                    property_id=prop.id,
                    actor=current_user.actor,
                    user_id=current_user.user_id,
                )
            await db.commit()
            return record
        except SQLAlchemyError:
            logger.exception(f"[WHATSAPP] Could not record delivery for {booking.reference}")
            await db.rollback()
            return None

    async def _evict(self, db: AsyncSession, property_id) -> None:
        stale = (
            select(NotificationRecord.id)
            .where(NotificationRecord.property_id == property_id)
            .order_by(NotificationRecord.id.desc())
            .offset(self.log_cap)
        )
        stale_ids = (await db.execute(stale)).scalars().all()
        if stale_ids:
            await db.execute(delete(NotificationRecord).where(NotificationRecord.id.in_(stale_ids)))


# Singleton
_dispatcher_instance: Optional[WhatsAppDispatcher] = None


def get_whatsapp_dispatcher() -> WhatsAppDispatcher:
    """Get the WhatsApp dispatcher instance."""
    global _dispatcher_instance
    if _dispatcher_instance is None:
        _dispatcher_instance = WhatsAppDispatcher()
    return _dispatcher_instance
