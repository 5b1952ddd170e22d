"""
Order Date Filter

Rules:
- Both bounds empty (or either one empty) => no filter, every order passes
- Otherwise keep orders where start <= dispatch_day <= end (inclusive)
- Orders without a well-formed dispatch_day never pass an active range
- A malformed bound matches nothing
- start > end => empty result

Dates are "YYYY-MM-DD" strings. The format is fixed-width and zero-padded,
so plain string comparison gives chronological order.
"""

import re
from datetime import date, datetime
from typing import Iterable, List, Optional, Union

from app.models import Order


ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DateBound = Optional[Union[str, date, datetime]]


def is_iso_date(value) -> bool:
    """Return True when value is a "YYYY-MM-DD" string."""
    return isinstance(value, str) and ISO_DATE_PATTERN.match(value) is not None


def _bound_key(value: DateBound) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def is_range_active(start_date: DateBound, end_date: DateBound) -> bool:
    """A range only filters when both bounds are set."""
    return bool(_bound_key(start_date)) and bool(_bound_key(end_date))


def filter_by_date_range(
    orders: Iterable[Order],
    start_date: DateBound,
    end_date: DateBound,
) -> List[Order]:
    """
    Narrow orders to those dispatched within [start_date, end_date].

    Args:
        orders: Orders in display order
        start_date: Inclusive lower bound, "YYYY-MM-DD" or date
        end_date: Inclusive upper bound, "YYYY-MM-DD" or date

    Returns:
        A new list preserving the input order
    """
    if not is_range_active(start_date, end_date):
        return list(orders)

    start = _bound_key(start_date)
    end = _bound_key(end_date)
    if not (is_iso_date(start) and is_iso_date(end)):
        return []

    return [
        order for order in orders
        if is_iso_date(order.dispatch_day) and start <= order.dispatch_day <= end
    ]
