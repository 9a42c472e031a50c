"""Stay pricing with seasonal multipliers."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from innflow.domain import compute_stay_total, iter_nights, nights_between


def make_room(price="100"):
    return SimpleNamespace(price_per_night=Decimal(price))


def make_rate(name, start, end, multiplier):
    return SimpleNamespace(name=name, start_date=start, end_date=end, multiplier=Decimal(multiplier))


PEAK = make_rate("Peak", date(2024, 12, 20), date(2024, 12, 31), "1.4")


def test_stay_inside_peak_is_uplifted():
    total = compute_stay_total(make_room(), date(2024, 12, 24), date(2024, 12, 27), [PEAK])
    assert total == 420


def test_stay_straddling_peak_end_mixes_rates():
    total = compute_stay_total(make_room(), date(2024, 12, 30), date(2025, 1, 2), [PEAK])
    assert total == 380


def test_no_rates_prices_at_base():
    assert compute_stay_total(make_room("850"), date(2024, 3, 1), date(2024, 3, 4)) == 2550


def test_rate_end_date_is_inclusive():
    rate = make_rate("One night", date(2024, 5, 1), date(2024, 5, 1), "2")
    assert compute_stay_total(make_room(), date(2024, 5, 1), date(2024, 5, 3), [rate]) == 300


def test_first_listed_rate_wins_on_overlap():
    wide = make_rate("Summer", date(2024, 12, 1), date(2025, 1, 31), "1.5")
    narrow = make_rate("Festive", date(2024, 12, 24), date(2024, 12, 26), "2")

    assert compute_stay_total(make_room(), date(2024, 12, 24), date(2024, 12, 25), [wide, narrow]) == 150
    assert compute_stay_total(make_room(), date(2024, 12, 24), date(2024, 12, 25), [narrow, wide]) == 200


def test_additivity_over_uniform_rate():
    rate = make_rate("Flat", date(2024, 1, 1), date(2024, 12, 31), "1.25")
    nights = 7
    total = compute_stay_total(make_room("333"), date(2024, 6, 1), date(2024, 6, 8), [rate])
    assert total == round(nights * 333 * 1.25)


def test_rounds_once_half_up():
    # 3 nights x 100.50 = 301.50 -> 302, not 3 x round(100.50)
    assert compute_stay_total(make_room("100.50"), date(2024, 2, 1), date(2024, 2, 4)) == 302


def test_inverted_or_empty_range_prices_zero():
    room = make_room()
    assert compute_stay_total(room, date(2024, 5, 3), date(2024, 5, 3)) == 0
    assert compute_stay_total(room, date(2024, 5, 3), date(2024, 5, 1)) == 0


def test_zero_multiplier_makes_free_nights():
    rate = make_rate("Comp", date(2024, 7, 1), date(2024, 7, 1), "0")
    assert compute_stay_total(make_room(), date(2024, 7, 1), date(2024, 7, 3), [rate]) == 100


def test_nights_across_dst_change_are_whole_days():
    # Europe/US DST transitions fall inside these ranges; civil dates ignore them
    nights = list(iter_nights(date(2024, 3, 30), date(2024, 4, 2)))
    assert nights == [date(2024, 3, 30), date(2024, 3, 31), date(2024, 4, 1)]
    assert compute_stay_total(make_room(), date(2024, 10, 26), date(2024, 10, 29)) == 300


def test_nights_between():
    assert nights_between(date(2024, 2, 28), date(2024, 3, 1)) == 2
    assert nights_between(date(2024, 3, 1), date(2024, 2, 28)) == 0
