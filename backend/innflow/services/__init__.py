"""Services for InnFlow."""

from innflow.services.audit import AuditService
from innflow.services.booking import BookingService
from innflow.services.notifications import WhatsAppDispatcher, get_whatsapp_dispatcher
from innflow.services.pdf_generator import PDFGenerator
from innflow.services.property import PropertyService

__all__ = [
    "AuditService",
    "BookingService",
    "WhatsAppDispatcher",
    "get_whatsapp_dispatcher",
    "PDFGenerator",
    "PropertyService",
]
