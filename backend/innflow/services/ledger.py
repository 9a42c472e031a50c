"""Booking ledger export and financial summaries."""

from collections import OrderedDict
from decimal import Decimal
from typing import Iterable

from innflow.models.booking import Booking
from innflow.models.enums import BookingStatus, PaymentStatus

CSV_HEADER = ["Reference", "Guest Name", "Room ID", "Check-In", "Check-Out", "Total", "Status", "Payment Method"]
NO_METHOD = "N/A"
OTHER_METHOD = "Other"


def ledger_csv(bookings: Iterable[Booking]) -> str:
    """Master ledger as CSV.

    The layout is fixed for spreadsheet imports: comma-joined header and
    rows, newline separated, guest name wrapped in double quotes and no
    further quoting or escaping.
    """
    lines = [",".join(CSV_HEADER)]
    for b in bookings:
        lines.append(",".join([
            b.reference,
            f'"{b.guest_name}"',
            str(b.room_id),
            b.check_in_date.isoformat(),
            b.check_out_date.isoformat(),
            str(b.total_amount),
            b.status.value,
            b.payment_method.value if b.payment_method else NO_METHOD,
        ]))
    return "\n".join(lines)


def revenue_summary(bookings: Iterable[Booking]) -> dict:
    """Revenue, paid and pending totals over non-cancelled bookings."""
    valid = [b for b in bookings if b.status != BookingStatus.CANCELLED]
    revenue = sum(b.total_amount for b in valid)
    paid = sum(b.total_amount for b in valid if b.payment_status == PaymentStatus.PAID)
    return {"revenue": revenue, "paid": paid, "pending": revenue - paid}


def payment_mix(bookings: Iterable[Booking]) -> list[dict]:
    """Booked value per payment method, in first-seen order, all statuses included."""
    totals: "OrderedDict[str, int]" = OrderedDict()
    for b in bookings:
        method = b.payment_method.value if b.payment_method else OTHER_METHOD
        totals[method] = totals.get(method, 0) + b.total_amount
    return [{"name": name, "value": value} for name, value in totals.items()]


def format_amount(amount) -> str:
    """Thousands-separated amount, decimals shown only when present."""
    value = Decimal(str(amount))
    if value == value.to_integral_value():
        return f"{int(value):,}"
    return f"{value:,.2f}"
