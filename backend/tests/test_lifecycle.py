"""Booking and payment status state machines."""

import pytest

from innflow.domain import (
    InvalidTransitionError,
    initial_state,
    validate_payment_transition,
    validate_status_transition,
)
from innflow.domain.lifecycle import is_terminal
from innflow.models.enums import BookingStatus, PaymentMethod, PaymentStatus


def test_instant_payment_confirms_and_settles():
    assert initial_state(PaymentMethod.IKHOKHA) == (BookingStatus.CONFIRMED, PaymentStatus.PAID)


@pytest.mark.parametrize(
    "method",
    [None, PaymentMethod.EFT, PaymentMethod.CASH_ON_ARRIVAL, PaymentMethod.CARD_ON_ARRIVAL],
)
def test_deferred_payment_is_provisional(method):
    assert initial_state(method) == (BookingStatus.PROVISIONAL, PaymentStatus.PENDING)


def test_happy_path():
    path = [
        BookingStatus.PROVISIONAL,
        BookingStatus.CONFIRMED,
        BookingStatus.CHECKED_IN,
        BookingStatus.CHECKED_OUT,
    ]
    for current, target in zip(path, path[1:]):
        validate_status_transition(current, target)


@pytest.mark.parametrize("current", [BookingStatus.PROVISIONAL, BookingStatus.CONFIRMED])
def test_check_in_from_either_pre_arrival_state(current):
    validate_status_transition(current, BookingStatus.CHECKED_IN)


@pytest.mark.parametrize("current", [BookingStatus.PROVISIONAL, BookingStatus.CONFIRMED])
def test_cancel_before_arrival(current):
    validate_status_transition(current, BookingStatus.CANCELLED)


@pytest.mark.parametrize(
    "current, target",
    [
        (BookingStatus.PROVISIONAL, BookingStatus.CHECKED_OUT),
        (BookingStatus.CHECKED_IN, BookingStatus.CANCELLED),
        (BookingStatus.CHECKED_OUT, BookingStatus.CHECKED_IN),
        (BookingStatus.CANCELLED, BookingStatus.CONFIRMED),
        (BookingStatus.CONFIRMED, BookingStatus.PROVISIONAL),
    ],
)
def test_illegal_transitions(current, target):
    with pytest.raises(InvalidTransitionError) as exc:
        validate_status_transition(current, target)
    assert exc.value.current == current.value
    assert exc.value.target == target.value


def test_terminal_states():
    assert is_terminal(BookingStatus.CANCELLED)
    assert is_terminal(BookingStatus.CHECKED_OUT)
    assert not is_terminal(BookingStatus.CHECKED_IN)


def test_payment_moves_forward():
    validate_payment_transition(PaymentStatus.PENDING, PaymentStatus.PARTIALLY_PAID)
    validate_payment_transition(PaymentStatus.PARTIALLY_PAID, PaymentStatus.PAID)
    validate_payment_transition(PaymentStatus.PENDING, PaymentStatus.PAID)
    validate_payment_transition(PaymentStatus.PAID, PaymentStatus.REFUNDED)


@pytest.mark.parametrize(
    "current, target",
    [
        (PaymentStatus.PAID, PaymentStatus.PENDING),
        (PaymentStatus.PAID, PaymentStatus.PARTIALLY_PAID),
        (PaymentStatus.REFUNDED, PaymentStatus.PAID),
    ],
)
def test_payment_cannot_move_backwards(current, target):
    with pytest.raises(InvalidTransitionError):
        validate_payment_transition(current, target)
