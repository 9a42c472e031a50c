"""API Routers for InnFlow."""

from innflow.routers.auth import router as auth_router
from innflow.routers.property import router as property_router
from innflow.routers.rooms import router as rooms_router
from innflow.routers.bookings import router as bookings_router
from innflow.routers.calendar import router as calendar_router
from innflow.routers.dashboard import router as dashboard_router
from innflow.routers.financials import router as financials_router
from innflow.routers.staff import router as staff_router
from innflow.routers.tenants import router as tenants_router
from innflow.routers.activity import router as activity_router
from innflow.routers.portal import router as portal_router

__all__ = [
    "auth_router",
    "property_router",
    "rooms_router",
    "bookings_router",
    "calendar_router",
    "dashboard_router",
    "financials_router",
    "staff_router",
    "tenants_router",
    "activity_router",
    "portal_router",
]
