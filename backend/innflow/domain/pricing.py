"""Stay pricing from nightly base rate and seasonal multipliers."""

from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, Iterator, Optional, Sequence

ONE_NIGHT = timedelta(days=1)
DEFAULT_MULTIPLIER = Decimal("1")


def iter_nights(check_in: date, check_out: date) -> Iterator[date]:
    """Yield each night of a stay: check_in inclusive, check_out exclusive.

    Civil dates only; stepping by one calendar day cannot drift across
    daylight-saving changes.
    """
    night = check_in
    while night < check_out:
        yield night
        night += ONE_NIGHT


def nights_between(check_in: date, check_out: date) -> int:
    """Number of nights in the stay, 0 for an empty or inverted range."""
    return max((check_out - check_in).days, 0)


def find_seasonal_rate(night: date, seasonal_rates: Iterable[Any]) -> Optional[Any]:
    """First rate in list order whose inclusive range covers ``night``."""
    for rate in seasonal_rates:
        if rate.start_date <= night <= rate.end_date:
            return rate
    return None


def multiplier_for(night: date, seasonal_rates: Iterable[Any]) -> Decimal:
    rate = find_seasonal_rate(night, seasonal_rates)
    if rate is None:
        return DEFAULT_MULTIPLIER
    return Decimal(str(rate.multiplier))


def compute_stay_total(
    room: Any,
    check_in: date,
    check_out: date,
    seasonal_rates: Sequence[Any] = (),
) -> int:
    """Total price of a stay in whole currency units.

    Each night costs ``room.price_per_night`` times the multiplier of the
    earliest listed seasonal rate covering that night (1 when none does).
    The sum is rounded half-up once, at the end. A check-out on or before
    check-in prices at 0.
    """
    if check_out <= check_in:
        return 0

    base = Decimal(str(room.price_per_night))
    total = Decimal("0")
    for night in iter_nights(check_in, check_out):
        total += base * multiplier_for(night, seasonal_rates)

    return int(total.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
