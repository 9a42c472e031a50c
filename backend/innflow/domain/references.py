"""Sequential human-readable booking references (``PREFIX-YYYY-NNNN``)."""

from datetime import date
from typing import Any, Optional, Tuple

DEFAULT_PREFIX = "INF"


def format_reference(prefix: str, year: int, number: int) -> str:
    return f"{prefix}-{year}-{number:04d}"


def next_reference(
    property: Any,
    year: Optional[int] = None,
    prefix: str = DEFAULT_PREFIX,
) -> Tuple[str, Any]:
    """Advance the property's reference counter and return the new reference.

    The counter is incremented by exactly one on ``property`` itself, which is
    returned alongside the reference. The counter does not reset when the
    year changes.

    Not safe for concurrent callers on its own: callers sharing a store must
    hold a lock on the property row for the duration of the booking insert.
    """
    if year is None:
        year = date.today().year

    property.last_ref_number = (property.last_ref_number or 0) + 1
    return format_reference(prefix, year, property.last_ref_number), property
