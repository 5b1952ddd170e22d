"""
Unit tests for the dispatch-day date filter.

Tests the rules:
1. Empty bounds => every order passes, input order kept
2. Active range => start <= dispatch_day <= end (inclusive)
3. Missing or malformed dispatch_day never passes an active range
4. start > end => empty result
"""

from datetime import date, datetime

from app.models import Order
from app.services.order_filters import (
    filter_by_date_range,
    is_iso_date,
    is_range_active,
)


def _order(code, dispatch_day, status="Posted"):
    return Order(order_code=code, status=status, dispatch_day=dispatch_day)


def _codes(orders):
    return [o.order_code for o in orders]


ORDERS = [
    _order("A", "2024-03-01"),
    _order("B", "2024-03-15"),
    _order("C", "2024-02-28"),
    _order("D", "2024-03-31"),
    _order("E", "2024-04-01"),
]


class TestNoFilter:
    """Tests for inactive ranges."""

    def test_empty_bounds_return_all(self):
        """Both bounds empty is the identity."""
        assert _codes(filter_by_date_range(ORDERS, "", "")) == ["A", "B", "C", "D", "E"]

    def test_none_bounds_return_all(self):
        assert _codes(filter_by_date_range(ORDERS, None, None)) == ["A", "B", "C", "D", "E"]

    def test_one_bound_missing_is_no_op(self):
        """A half-filled range does not filter."""
        assert len(filter_by_date_range(ORDERS, "2024-03-01", "")) == 5
        assert len(filter_by_date_range(ORDERS, "", "2024-03-31")) == 5

    def test_no_filter_keeps_orders_without_dispatch_day(self):
        orders = ORDERS + [_order("F", None)]
        assert "F" in _codes(filter_by_date_range(orders, "", ""))

    def test_returns_new_list(self):
        result = filter_by_date_range(ORDERS, "", "")
        assert result == ORDERS
        assert result is not ORDERS


class TestActiveRange:
    """Tests for an active date range."""

    def test_inclusive_bounds(self):
        """Orders on the first and last day are included."""
        result = filter_by_date_range(ORDERS, "2024-03-01", "2024-03-31")
        assert _codes(result) == ["A", "B", "D"]

    def test_preserves_input_order(self):
        orders = [ORDERS[3], ORDERS[0], ORDERS[1]]
        result = filter_by_date_range(orders, "2024-03-01", "2024-03-31")
        assert _codes(result) == ["D", "A", "B"]

    def test_single_day_range(self):
        assert _codes(filter_by_date_range(ORDERS, "2024-03-15", "2024-03-15")) == ["B"]

    def test_every_result_within_bounds(self):
        start, end = "2024-02-29", "2024-03-20"
        result = filter_by_date_range(ORDERS, start, end)
        assert all(o in ORDERS for o in result)
        assert all(start <= o.dispatch_day <= end for o in result)

    def test_start_after_end_is_empty(self):
        """An inverted range cannot match anything."""
        assert filter_by_date_range(ORDERS, "2024-03-31", "2024-03-01") == []

    def test_date_objects_accepted(self):
        result = filter_by_date_range(ORDERS, date(2024, 3, 1), date(2024, 3, 31))
        assert _codes(result) == ["A", "B", "D"]

    def test_datetime_bounds_use_calendar_day(self):
        result = filter_by_date_range(ORDERS, datetime(2024, 3, 1), datetime(2024, 3, 31, 18, 30))
        assert _codes(result) == ["A", "B", "D"]

    def test_missing_dispatch_day_excluded(self):
        orders = [_order("X", None), _order("Y", ""), _order("Z", "2024-03-05")]
        assert _codes(filter_by_date_range(orders, "2024-03-01", "2024-03-31")) == ["Z"]

    def test_malformed_dispatch_day_excluded(self):
        """Non-padded or non-ISO values do not match."""
        orders = [_order("X", "2024-3-05"), _order("Y", "03/05/2024"), _order("Z", "2024-03-05")]
        assert _codes(filter_by_date_range(orders, "2024-03-01", "2024-03-31")) == ["Z"]

    def test_malformed_bound_matches_nothing(self):
        assert filter_by_date_range(ORDERS, "March 1", "2024-03-31") == []

    def test_empty_input(self):
        assert filter_by_date_range([], "2024-03-01", "2024-03-31") == []


class TestHelpers:
    """Tests for is_iso_date and is_range_active."""

    def test_is_iso_date(self):
        assert is_iso_date("2024-01-09")
        assert not is_iso_date("2024-1-9")
        assert not is_iso_date("")
        assert not is_iso_date(None)
        assert not is_iso_date(20240109)

    def test_is_range_active(self):
        assert is_range_active("2024-01-01", "2024-01-31")
        assert not is_range_active("2024-01-01", "")
        assert not is_range_active(None, "2024-01-31")
        assert not is_range_active("", "")
