"""Booking status and payment status state machines."""

from typing import Optional, Tuple

from innflow.models.enums import BookingStatus, PaymentStatus, PaymentMethod


class InvalidTransitionError(ValueError):
    """Requested status change is not an edge of the state machine."""

    def __init__(self, field: str, current: str, target: str):
        self.field = field
        self.current = current
        self.target = target
        super().__init__(f"Cannot change {field} from {current} to {target}")


# Check-in/check-out are unconditional with respect to payment
BOOKING_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PROVISIONAL: frozenset({
        BookingStatus.CONFIRMED, BookingStatus.CHECKED_IN, BookingStatus.CANCELLED,
    }),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.CHECKED_IN, BookingStatus.CANCELLED}),
    BookingStatus.CHECKED_IN: frozenset({BookingStatus.CHECKED_OUT}),
    BookingStatus.CHECKED_OUT: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}

PAYMENT_TRANSITIONS: dict[PaymentStatus, frozenset[PaymentStatus]] = {
    PaymentStatus.PENDING: frozenset({
        PaymentStatus.PARTIALLY_PAID, PaymentStatus.PAID, PaymentStatus.REFUNDED,
    }),
    PaymentStatus.PARTIALLY_PAID: frozenset({PaymentStatus.PAID, PaymentStatus.REFUNDED}),
    PaymentStatus.PAID: frozenset({PaymentStatus.REFUNDED}),
    PaymentStatus.REFUNDED: frozenset(),
}


def initial_state(payment_method: Optional[PaymentMethod]) -> Tuple[BookingStatus, PaymentStatus]:
    """Status pair for a new booking.

    Instantly verified payment confirms and settles the booking; anything
    else (including no method) leaves it provisional and unpaid.
    """
    if payment_method is not None and payment_method.is_instant:
        return BookingStatus.CONFIRMED, PaymentStatus.PAID
    return BookingStatus.PROVISIONAL, PaymentStatus.PENDING


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    return target in BOOKING_TRANSITIONS[current]


def validate_status_transition(current: BookingStatus, target: BookingStatus) -> None:
    if not can_transition(current, target):
        raise InvalidTransitionError("status", current.value, target.value)


def can_transition_payment(current: PaymentStatus, target: PaymentStatus) -> bool:
    return target in PAYMENT_TRANSITIONS[current]


def validate_payment_transition(current: PaymentStatus, target: PaymentStatus) -> None:
    if not can_transition_payment(current, target):
        raise InvalidTransitionError("payment status", current.value, target.value)


def is_terminal(status: BookingStatus) -> bool:
    return not BOOKING_TRANSITIONS[status]
