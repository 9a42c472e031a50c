"""Booking domain rules: pricing, availability, references and lifecycle.

Pure functions over plain attribute-bearing objects (ORM rows or schemas).
Routers and services call these; they never price, check availability or
build references themselves.
"""

from innflow.domain.availability import find_conflict, is_room_available, occupying_booking, ranges_overlap
from innflow.domain.lifecycle import (
    InvalidTransitionError,
    can_transition,
    initial_state,
    validate_payment_transition,
    validate_status_transition,
)
from innflow.domain.pricing import compute_stay_total, iter_nights, nights_between
from innflow.domain.references import format_reference, next_reference
from innflow.domain.templates import payment_link, render_message

__all__ = [
    "compute_stay_total",
    "iter_nights",
    "nights_between",
    "is_room_available",
    "find_conflict",
    "occupying_booking",
    "ranges_overlap",
    "next_reference",
    "format_reference",
    "initial_state",
    "can_transition",
    "validate_status_transition",
    "validate_payment_transition",
    "InvalidTransitionError",
    "render_message",
    "payment_link",
]
